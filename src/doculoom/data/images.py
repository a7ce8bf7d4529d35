"""
Module: data.images

Purpose:
    Natural size of image files and the element size derived from it.
    Only the header is read; pixel data is never decoded.

Key Functions:
    - read_image_size(source): (width, height) of an image, or None
    - fit_image_dimension(size, max_width): Element size keeping the ratio

Dependencies:
    - PIL: Image header parsing

Used By:
    - editor.factories.create_image_element
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from PIL import Image, UnidentifiedImageError

from doculoom.core.models import MIN_ELEMENT_SIZE, Dimension

logger = logging.getLogger(__name__)

ImageSource = Union[str, Path, bytes]


def read_image_size(source: ImageSource) -> Optional[Tuple[int, int]]:
    """
    Read the pixel size of an image.

    Args:
        source: File path or raw image bytes

    Returns:
        (width, height), or None when the image cannot be read
    """
    stream = io.BytesIO(source) if isinstance(source, bytes) else Path(source)
    try:
        with Image.open(stream) as img:
            width, height = img.size
    except (OSError, UnidentifiedImageError) as e:
        logger.warning(f"Cannot read image size: {e}")
        return None
    if width <= 0 or height <= 0:
        return None
    return width, height


def fit_image_dimension(size: Tuple[int, int], max_width: float) -> Dimension:
    """
    Scale a natural image size down to ``max_width``, keeping the ratio.

    Images narrower than ``max_width`` keep their natural size. Both axes
    are floored to the minimum element size.

    Example:
        >>> fit_image_dimension((400, 200), 200)
        Dimension(width=200, height=100.0)
    """
    width, height = size
    if width > max_width:
        height = height * max_width / width
        width = max_width
    return Dimension(width, height).floored(MIN_ELEMENT_SIZE)
