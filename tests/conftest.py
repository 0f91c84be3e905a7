#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from numbermask.caret import DeferredQueue


# Fakes ----------------------------------------------------------------------------------------------------------------

class FakeTarget:
    """Field element recording every selection range set on it."""

    def __init__(self, value: str = ""):
        self.value = value
        self.selections: list[tuple[int, int]] = []

    def set_selection_range(self, start: int, end: int) -> None:
        self.selections.append((start, end))


class FakeEvent:
    """Change/focus event counting persist() calls."""

    def __init__(self, target=None):
        self.target = target
        self.persist_calls = 0

    def persist(self) -> None:
        self.persist_calls += 1


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def queue() -> DeferredQueue:
    return DeferredQueue()


@pytest.fixture
def make_event():
    """Factory for a FakeEvent whose target shows the given text."""

    def _make_event(value: str = "") -> FakeEvent:
        return FakeEvent(FakeTarget(value))

    return _make_event
