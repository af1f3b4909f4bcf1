# renderer/preview.py
import numpy as np
import pygame

def to_surface(rgb8: np.ndarray) -> pygame.Surface:
    """
    Wraps a (height, width, 3) uint8 image in a pygame Surface.
    pygame indexes pixels as [x, y], so the first two axes are swapped.
    """
    return pygame.surfarray.make_surface(np.ascontiguousarray(rgb8.swapaxes(0, 1)))

def show(rgb8: np.ndarray, title: str = "Ray Tracer Preview") -> None:
    """
    Opens a window showing the image until it is closed or Escape is pressed.
    """
    height, width = rgb8.shape[:2]
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        screen.blit(to_surface(rgb8), (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()
