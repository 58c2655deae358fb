# renderer/image.py
import os
import numpy as np
from PIL import Image

def write_ppm(image: np.ndarray, path: str) -> None:
    """
    Write an (h, w, 3) uint8 image as plain-text PPM (P3), top row first,
    one "r g b" line per pixel.
    """
    height, width = image.shape[:2]
    with open(path, "w", newline="\n") as f:
        f.write("P3\n")
        f.write(f"{width} {height}\n")
        f.write("255\n")
        for row in image:
            for r, g, b in row:
                f.write(f"{int(r)} {int(g)} {int(b)}\n")

def save_image(image: np.ndarray, path: str) -> None:
    """
    Save the image, choosing the format from the file extension. PPM is
    written directly; anything else goes through Pillow.
    """
    ext = os.path.splitext(path)[1].lower()
    if ext == ".ppm":
        write_ppm(image, path)
    else:
        Image.fromarray(np.ascontiguousarray(image, dtype=np.uint8)).save(path)
