import os
import requests

from staticmapkit.exceptions import ImageDownloadError


def download_static_map(url, output_path, timeout=30):
    """
    Download the image behind a Static Maps URL.

    Args:
        url (str): URL produced by ``StaticMapProvider``.
        output_path (str or os.PathLike): Where to write the image.
        timeout (float): Seconds to wait for the server.

    Returns:
        str: The path the image was written to.

    Raises:
        ImageDownloadError: If the request fails or the server answers with an error.
    """
    output_path = os.fspath(output_path)
    parent = os.path.dirname(output_path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    print(f"Downloading static map to {output_path}...")
    try:
        with requests.get(url, stream=True, timeout=timeout) as r:
            r.raise_for_status()
            with open(output_path, 'wb') as f:
                for chunk in r.iter_content(chunk_size=8192):
                    f.write(chunk)
    except (requests.RequestException, OSError) as e:
        # Clean up partial file if failed
        if os.path.exists(output_path):
            os.remove(output_path)
        raise ImageDownloadError(f"Failed to download static map: {e}") from e

    return output_path
