# main.py
import logging
import numpy as np
import pygame
from PIL import Image
from raytracer.config import DISPLAY_SETTINGS, RENDER_SETTINGS, get_quality
from raytracer.geometry.bvh import flatten_bvh
from raytracer.renderer.raytracer import Renderer
from raytracer.scenes import SCENES, three_spheres

logger = logging.getLogger(__name__)

class Application:
    """
    Real-time viewer: re-renders the scene with the parallel renderer every
    frame and shows it upscaled in a pygame window. Escape or closing the
    window quits.
    """
    def __init__(self, quality: str = "interactive"):
        pygame.init()

        settings = get_quality(quality)
        self.world, camera = three_spheres(settings["samples"], settings["max_depth"])
        self.renderer = Renderer(RENDER_SETTINGS['aspect_ratio'], settings["image_width"], camera)
        self.size = (self.renderer.image_width, self.renderer.image_height)

        upscale = DISPLAY_SETTINGS['upscale']
        self.screen = pygame.display.set_mode((self.size[0] * upscale, self.size[1] * upscale))
        pygame.display.set_caption(DISPLAY_SETTINGS['caption'])
        self.clock = pygame.time.Clock()

    def draw_frame(self):
        data = self.renderer.render_parallel_bytes(self.world)
        frame = pygame.image.frombuffer(data, self.size, "RGBA")
        self.screen.blit(pygame.transform.smoothscale(frame, self.screen.get_size()), (0, 0))
        pygame.display.flip()

    def run(self):
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            if not running:
                break
            self.draw_frame()
            self.clock.tick()
            logger.debug("Frame took %d ms", self.clock.get_time())
        pygame.quit()

def save_image(raster: np.ndarray, output_path: str):
    """Encode an RGBA raster to an image file; the format follows the extension."""
    Image.fromarray(raster).save(output_path)
    logger.info("Saved %dx%d image to %s", raster.shape[1], raster.shape[0], output_path)

def render_to_file(scene: str = "random_spheres", quality: str = "balanced",
                   output_path: str = None, parallel: bool = True) -> np.ndarray:
    settings = get_quality(quality)
    world, camera = SCENES[scene](settings["samples"], settings["max_depth"])

    if world.bvh_root is not None:
        _, _, _, _, is_leaf, _ = flatten_bvh(world.bvh_root)
        logger.info("Scene %r: %d objects, %d BVH nodes, depth %d", scene, len(world),
                    int((is_leaf == 0).sum()), world.bvh_root.depth())

    renderer = Renderer(RENDER_SETTINGS['aspect_ratio'], settings["image_width"], camera)
    raster = renderer.render_parallel(world) if parallel else renderer.render(world)
    save_image(raster, output_path or RENDER_SETTINGS['output_path'])
    return raster

def main():
    logging.basicConfig(level=logging.INFO, format=RENDER_SETTINGS['log_format'])
    render_to_file()

if __name__ == "__main__":
    main()
