import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import doculoom
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from doculoom.editor.config import EditorConfig  # noqa: E402


# Common test fixtures
@pytest.fixture
def sequential_ids():
    """Id factory returning e1, e2, ... for predictable element ids."""
    counter = iter(range(1, 10_000))
    return lambda: f"e{next(counter)}"


@pytest.fixture
def config():
    """Default editor configuration."""
    return EditorConfig()


@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a simple 400x200 test image."""
    img = Image.new("RGB", (400, 200), color="white")
    img_path = tmp_path / "sample.png"
    img.save(img_path)
    return img_path
