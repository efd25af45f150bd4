"""
Constants and configuration values for the image filter demo.
"""

# Base image trace lines
LOADING_MESSAGE = "loading image: {name}"
DISPLAY_MESSAGE = "displaying base image: {name}"

# Filter trace lines
BLACK_AND_WHITE_MESSAGE = "applying black-and-white filter."
SEPIA_MESSAGE = "applying sepia filter."
BLUR_MESSAGE = "applying blur filter."

# Demo
DEFAULT_IMAGE_NAME = "FotoLiburan.jpg"
DEMO_HEADER = "--- Decorator pattern example for image filters ---"
SECTION_SEPARATOR = "-" * 58

# (title, filters innermost-first)
DEMO_SECTIONS = [
    ("displaying original image", []),
    ("displaying image with black-and-white filter", ["black-and-white"]),
    ("displaying image with black-and-white then sepia filter", ["black-and-white", "sepia"]),
    ("displaying image with blur then sepia filter", ["blur", "sepia"]),
    ("displaying image with sepia then blur filter", ["sepia", "blur"]),
]

