from teleprompter.domain.pacing import advance_progress


def test_repeated_ticks_stay_monotonic_and_bounded():
    progress = 0.0
    for multiplier in [0.1, 1.0, 3.0, 2.5, 0.5] * 60:
        previous = progress
        progress = advance_progress(
            progress,
            interval=0.1,
            speed_multiplier=multiplier,
            total_duration=30.0,
        )
        assert previous <= progress <= 1.0
    assert progress == 1.0
