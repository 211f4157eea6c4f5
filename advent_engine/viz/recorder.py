import os
import pygame
import cv2
import numpy as np
from datetime import datetime


def default_output(directory: str = "recordings") -> str:
    """Timestamped mp4 name, inside directory when it exists."""
    fname = f"wires_{datetime.now().strftime('%Y%m%d_%H%M%S')}.mp4"
    if os.path.isdir(directory):
        return os.path.join(directory, fname)
    return fname


def surface_to_bgr(surface: pygame.Surface) -> np.ndarray:
    # pygame: (width, height, 3) RGB -> OpenCV: (height, width, 3) BGR
    rgb = np.transpose(pygame.surfarray.array3d(surface), (1, 0, 2))
    return cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR)


class VideoRecorder:
    """Streams renderer frames into an mp4. The first frame fixes the video size."""

    def __init__(self, active=False, output_file=None, fps=30):
        self.active = active
        self.output_file = output_file or (default_output() if active else None)
        self.fps = fps
        self.writer = None
        self.frame_size = None
        self.frame_count = 0

    def capture_frame(self, surface: pygame.Surface):
        if not self.active:
            return

        if self.writer is None:
            self.frame_size = surface.get_size()
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, self.frame_size)
            print(f"Recording started: {self.output_file}")
        elif surface.get_size() != self.frame_size:
            # Window was resized mid-recording
            surface = pygame.transform.scale(surface, self.frame_size)

        self.writer.write(surface_to_bgr(surface))
        self.frame_count += 1

    def stop(self):
        if self.writer:
            self.writer.release()
            print(f"Video saved: {self.output_file} ({self.frame_count} frames)")
            self.writer = None
