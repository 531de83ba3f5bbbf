"""Tests for the scene state evaluator."""

import pytest

from mgg.models import DiagramSceneState, SceneType, StandardSceneState
from mgg.motion.scene import evaluate_scene, scene_opacity
from mgg.motion.spring import CRITICALLY_DAMPED, spring
from mgg.motion.themes import NEON


class TestSceneOpacity:
    def test_trapezoid(self):
        assert scene_opacity(0, 90) == 0.0
        assert scene_opacity(5, 90) == 0.5
        assert scene_opacity(10, 90) == 1.0
        assert scene_opacity(50, 90) == 1.0
        assert scene_opacity(85, 90) == 0.5
        assert scene_opacity(90, 90) == 0.0

    def test_short_scene_splits_fades(self):
        assert scene_opacity(0, 12) == 0.0
        assert scene_opacity(6, 12) == 1.0
        assert scene_opacity(9, 12) == 0.5


class TestStandardScenes:
    def test_intro_at_first_frame(self, make_scene, canvas):
        state = evaluate_scene(make_scene(type="intro"), 0, canvas)
        assert isinstance(state, StandardSceneState)
        assert state.opacity == 0.0
        assert state.translate_y == 100.0
        assert state.title_font_size == 80
        assert state.ring is not None
        assert state.ring.diameter == 1080 * 1.5
        assert state.ring.scale == 0.0
        assert not state.quote_glyphs
        assert state.progress == 0.0

    def test_entrance_slides_up(self, make_scene, canvas):
        state = evaluate_scene(make_scene(), 15, canvas)
        entrance = spring(15, canvas.fps, CRITICALLY_DAMPED)
        assert state.translate_y == pytest.approx(100 * (1 - entrance))
        assert 0 < state.translate_y < 10

    @pytest.mark.parametrize("scene_type, font_size, glyphs", [
        ("quote", 50, True),
        ("bullet_point", 70, False),
        ("outro", 70, False),
    ])
    def test_layout_by_variant(self, make_scene, canvas, scene_type, font_size, glyphs):
        state = evaluate_scene(make_scene(type=scene_type), 30, canvas)
        assert state.scene_type == SceneType(scene_type)
        assert state.title_font_size == font_size
        assert state.subtitle_font_size == 32
        assert state.quote_glyphs is glyphs
        assert state.ring is None

    def test_progress_bar_grows(self, make_scene, canvas):
        scene = make_scene(durationInFrames=90)
        values = [evaluate_scene(scene, f, canvas).progress for f in range(90)]
        assert values[0] == 0.0
        assert values[45] == 0.5
        assert all(b > a for a, b in zip(values, values[1:]))

    def test_colors_pass_through(self, make_scene, canvas):
        state = evaluate_scene(make_scene(backgroundColor="#112233", textColor="#fefefe"), 20, canvas)
        assert state.background_color == "#112233"
        assert state.text_color == "#fefefe"


class TestDiagramScenes:
    def test_dispatches_to_diagram_evaluator(self, redis_video, canvas):
        state = evaluate_scene(redis_video.scenes[0], 80, canvas)
        assert isinstance(state, DiagramSceneState)
        assert state.kind == "diagram"
        assert state.title == "Redis Distributed Lock"
        assert len(state.nodes) == 4
        assert len(state.edges) == 3
        assert len(state.packets) == 1

    def test_empty_diagram(self, make_scene, canvas):
        scene = make_scene(type="tech_diagram", diagramConfig={})
        state = evaluate_scene(scene, 10, canvas)
        assert isinstance(state, DiagramSceneState)
        assert state.nodes == []

    def test_theme_name_is_reported(self, redis_video, canvas):
        state = evaluate_scene(redis_video.scenes[0], 10, canvas, theme=NEON)
        assert state.theme == "neon"

    def test_same_frame_same_output(self, redis_video, canvas):
        scene = redis_video.scenes[0]
        first = evaluate_scene(scene, 123, canvas).model_dump()
        evaluate_scene(scene, 7, canvas)
        assert evaluate_scene(scene, 123, canvas).model_dump() == first
