"""
Walkthrough of several filter chains over a single base image.
"""
from .constants import DEFAULT_IMAGE_NAME, DEMO_HEADER, DEMO_SECTIONS, SECTION_SEPARATOR
from .filters import compose
from .image import BaseImage


def run_demo(image_name: str = DEFAULT_IMAGE_NAME) -> None:
    """
    Print the demo: header, image load, then one section per chain.

    The same BaseImage is shared by every chain, so the loading line is
    printed only once.
    """
    print(DEMO_HEADER)

    image = BaseImage(image_name)

    for title, filter_names in DEMO_SECTIONS:
        chain = compose(image, filter_names)
        print(f"\n[{title}]")
        chain.render()
        print(SECTION_SEPARATOR)
