# renderer/raytracer.py
import queue
import random
import time
from concurrent.futures import ThreadPoolExecutor
import numpy as np
from core.color import BLACK
from core.config import DEFAULT_WORKERS, PROGRESS_STEPS
from renderer.integrator import ray_color
from renderer.tone_mapping import gamma_correct
from renderer.image import save_image

class RenderError(RuntimeError):
    """A render worker failed; the image is incomplete and discarded."""

class Renderer:
    """
    Renders a Scene on a fixed pool of worker threads.

    Rows are the unit of work. Workers only read the scene and send finished
    pixels, keyed by (row, col), through a queue; the calling thread collects
    them and is the only writer of the image buffer.
    """
    def __init__(self, scene, n_workers: int = DEFAULT_WORKERS, seed=None, verbose: bool = True):
        if n_workers < 1:
            raise ValueError(f"Renderer needs at least one worker, got {n_workers}")
        self.scene = scene
        self.n_workers = n_workers
        self.seed = seed
        self.verbose = verbose

    def _log(self, message: str):
        if self.verbose:
            print(message)

    def _row_rng(self, row: int) -> random.Random:
        # One generator per row keeps seeded renders independent of thread scheduling.
        if self.seed is None:
            return random.Random()
        return random.Random(f"{self.seed}:{row}")

    def render_row(self, i: int, results: queue.Queue):
        """
        Compute every pixel of image-plane row i (0 is the bottom row) and
        send each one to the collector.
        """
        scene = self.scene
        rng = self._row_rng(i)
        for j in range(scene.width):
            color = BLACK
            for _ in range(scene.samples_per_pixel):
                u = (j + rng.random()) / scene.width
                v = (i + rng.random()) / scene.height
                ray = scene.camera.get_ray(u, v)
                color = color + ray_color(ray, scene, scene.depth, rng)
            # Rows are stored top-first in the output image
            results.put(((scene.height - 1 - i, j), gamma_correct(color, scene.samples_per_pixel)))

    def _run_row(self, i: int, results: queue.Queue):
        try:
            self.render_row(i, results)
        except Exception as e:
            results.put((None, (i, e)))
            raise

    def render(self) -> np.ndarray:
        """
        Render the scene. Returns an (height, width, 3) uint8 array, top row first.
        """
        scene = self.scene
        total = scene.width * scene.height
        image = np.zeros((scene.height, scene.width, 3), dtype=np.uint8)
        results = queue.Queue()

        self._log(f"Starting rendering... {scene.width}x{scene.height}, "
                  f"{scene.samples_per_pixel} samples per pixel, depth {scene.depth}, "
                  f"{self.n_workers} workers")
        start = time.perf_counter()

        pool = ThreadPoolExecutor(max_workers=self.n_workers, thread_name_prefix="render")
        try:
            for i in range(scene.height):
                pool.submit(self._run_row, i, results)

            n_pixels_computed = 0
            reported_steps = 0
            while n_pixels_computed < total:
                key, value = results.get()
                if key is None:
                    row, error = value
                    raise RenderError(f"Worker failed on row {row}: {error}") from error
                row, col = key
                image[row, col] = value
                n_pixels_computed += 1
                # One line per completed 1/PROGRESS_STEPS of the image
                steps = n_pixels_computed * PROGRESS_STEPS // total
                if steps > reported_steps:
                    reported_steps = steps
                    self._log(f"Rendered {n_pixels_computed} / {total} pixels "
                              f"(~{100.0 * n_pixels_computed / total:.0f}%), "
                              f"time elapsed: {time.perf_counter() - start:.2f}s")
        except BaseException:
            pool.shutdown(wait=True, cancel_futures=True)
            raise
        pool.shutdown(wait=True)

        self._log(f"Rendering finished in {time.perf_counter() - start:.2f}s")
        return image

    def render_to_file(self, path: str) -> np.ndarray:
        image = self.render()
        save_image(image, path)
        self._log(f"Image written to {path}")
        return image
