"""Tests for the timeline sequencer."""

import pytest

from mgg.motion.timeline import TimelinePosition, locate, scene_offsets, total_frames


@pytest.fixture
def scenes(make_scene):
    return [make_scene(durationInFrames=d) for d in (60, 90, 120)]


class TestOffsets:
    def test_prefix_sums(self, scenes):
        assert scene_offsets(scenes) == [0, 60, 150]
        assert total_frames(scenes) == 270

    def test_empty(self):
        assert scene_offsets([]) == []
        assert total_frames([]) == 0


class TestLocate:
    def test_start_of_third_scene(self, scenes):
        assert locate(scenes, 60 + 90) == TimelinePosition(2, 0)

    def test_last_frame_of_second_scene(self, scenes):
        assert locate(scenes, 60 + 90 - 1) == TimelinePosition(1, 89)

    def test_first_frame(self, scenes):
        assert locate(scenes, 0) == (0, 0)

    def test_every_frame_maps_into_its_scene(self, scenes):
        offsets = scene_offsets(scenes)
        for frame in range(total_frames(scenes)):
            index, local = locate(scenes, frame)
            assert offsets[index] + local == frame
            assert 0 <= local < scenes[index].duration_in_frames

    def test_negative_frame_clamps_to_start(self, scenes):
        assert locate(scenes, -30) == TimelinePosition(0, 0)

    def test_frame_past_end_clamps_to_last_frame(self, scenes):
        assert locate(scenes, 270) == TimelinePosition(2, 119)
        assert locate(scenes, 10_000) == TimelinePosition(2, 119)

    def test_no_scenes(self):
        assert locate([], 5) is None

    def test_uses_scene_offsets(self, scenes, monkeypatch):
        import mgg.motion.timeline as timeline

        calls = []

        def offsets(items):
            calls.append(len(items))
            return scene_offsets(items)

        monkeypatch.setattr(timeline, "scene_offsets", offsets)
        assert timeline.locate(scenes, 200) == TimelinePosition(2, 50)
        assert calls == [3]
