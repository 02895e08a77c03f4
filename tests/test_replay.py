import pytest

from taskscheduler.models import IDLE, ExecutionBlock
from taskscheduler.replay import Frame, ReplayCursor


def _timeline():
    return (ExecutionBlock("A", 0, 2), ExecutionBlock("B", 5, 7))


def test_frames_cover_blocks_and_idle_gaps():
    frames = list(ReplayCursor(_timeline()))
    assert frames == [
        Frame(0, "A", 1),
        Frame(1, "A", 2),
        Frame(2, IDLE, 0),
        Frame(3, IDLE, 0),
        Frame(4, IDLE, 0),
        Frame(5, "B", 1),
        Frame(6, "B", 2),
    ]


def test_step_past_the_end_raises():
    cursor = ReplayCursor(_timeline())
    for _ in range(7):
        cursor.step()
    assert cursor.done
    with pytest.raises(IndexError):
        cursor.step()


def test_reset_replays_from_start():
    cursor = ReplayCursor(_timeline())
    cursor.step()
    cursor.step()
    cursor.reset()
    assert cursor.step() == Frame(0, "A", 1)


def test_running_at():
    cursor = ReplayCursor(_timeline())
    assert cursor.running_at(1) == "A"
    assert cursor.running_at(3) is IDLE
    assert cursor.running_at(6) == "B"
    assert cursor.running_at(7) is IDLE


def test_empty_timeline_is_done():
    cursor = ReplayCursor(())
    assert cursor.makespan == 0
    assert list(cursor) == []
