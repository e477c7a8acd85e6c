"""Tests for stepping through a finished simulation."""

import pytest

from replacement import TimelineCursor, simulate


@pytest.fixture
def result(classic_refs):
    return simulate(classic_refs, 3, "FIFO")


class TestTimelineCursor:
    def test_starts_at_first_step(self, result) -> None:
        cursor = TimelineCursor(result)
        assert cursor.index == 0
        assert cursor.current() is result.steps[0]
        assert cursor.at_start

    def test_step_backward_at_start_does_nothing(self, result) -> None:
        cursor = TimelineCursor(result)
        assert cursor.step_backward() is False
        assert cursor.index == 0

    def test_step_forward_at_end_does_nothing(self, result) -> None:
        cursor = TimelineCursor(result)
        cursor.jump_to_end()
        assert cursor.index == len(result.steps) - 1
        assert cursor.step_forward() is False
        assert cursor.index == len(result.steps) - 1
        assert cursor.at_end

    def test_forward_and_back(self, result) -> None:
        cursor = TimelineCursor(result)
        assert cursor.step_forward() is True
        assert cursor.step_forward() is True
        assert cursor.current().reference_index == 2
        assert cursor.step_backward() is True
        assert cursor.index == 1

    def test_reset_and_jump_to_start(self, result) -> None:
        cursor = TimelineCursor(result)
        cursor.jump_to_end()
        cursor.reset()
        assert cursor.index == 0
        cursor.jump_to(5)
        cursor.jump_to_start()
        assert cursor.index == 0

    def test_jump_to_is_clamped(self, result) -> None:
        cursor = TimelineCursor(result)
        cursor.jump_to(99)
        assert cursor.index == len(result.steps) - 1
        cursor.jump_to(-4)
        assert cursor.index == 0

    def test_cursors_are_independent(self, result) -> None:
        first = TimelineCursor(result)
        second = TimelineCursor(result)
        first.jump_to_end()
        assert second.index == 0
        assert first.result is second.result

    def test_result_is_untouched(self, result, classic_refs) -> None:
        before = simulate(classic_refs, 3, "FIFO")
        cursor = TimelineCursor(result)
        while cursor.step_forward():
            pass
        cursor.reset()
        assert result == before

    def test_single_step_timeline(self) -> None:
        cursor = TimelineCursor(simulate(["a"], 1, "FIFO"))
        assert cursor.at_start and cursor.at_end
        assert cursor.step_forward() is False
        assert cursor.step_backward() is False
        assert len(cursor) == 1
