import pytest

from leitner.domain.models import Flashcard


def create_flashcard(front: str, back: str, hint: str = "", tags=()) -> Flashcard:
    return Flashcard(front, back, hint, frozenset(tags))


@pytest.fixture
def make_card():
    """Factory fixture for building flashcards."""
    return create_flashcard


@pytest.fixture
def mock_home(tmp_path, monkeypatch):
    """Mocks Path.home() to point to a temp dir."""
    home = tmp_path / "home"
    home.mkdir()

    # Mocking HOME to a temp directory to isolate config
    monkeypatch.setenv("HOME", str(home))
    for var in ("LEITNER_STRICT", "LEITNER_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    return home
