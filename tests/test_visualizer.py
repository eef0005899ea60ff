"""
Tests for figure rendering.
"""

import base64

from punnett_engine import (
    EYE_COLOR, HAIR_TYPE,
    PunnettSquare, OffspringTable,
    CrossVisualizer, FigureConfig
)

PNG_MAGIC = b"\x89PNG"


def _offspring(eye="Bb", hair="Cc"):
    eye_square = PunnettSquare.build(EYE_COLOR, eye, eye)
    hair_square = PunnettSquare.build(HAIR_TYPE, hair, hair)
    return OffspringTable.build(eye_square.results, hair_square.results,
                                traits=[EYE_COLOR, HAIR_TYPE])


class TestCrossVisualizer:
    def setup_method(self):
        self.visualizer = CrossVisualizer(config=FigureConfig(dpi=40), seed=7)

    def test_punnett_image_is_png(self):
        img = self.visualizer.create_punnett_image(PunnettSquare.build(EYE_COLOR, "Bb", "bb"))
        assert base64.b64decode(img).startswith(PNG_MAGIC)

    def test_offspring_image_is_png(self):
        img = self.visualizer.create_offspring_image(_offspring())
        assert base64.b64decode(img).startswith(PNG_MAGIC)

    def test_single_card(self):
        img = self.visualizer.create_offspring_image(_offspring("BB", "cc"))
        assert base64.b64decode(img).startswith(PNG_MAGIC)

    def test_save_path(self, tmp_path):
        path = tmp_path / "square.png"
        self.visualizer.create_punnett_image(PunnettSquare.build(HAIR_TYPE, "Cc", "Cc"),
                                             save_path=str(path))
        assert path.read_bytes().startswith(PNG_MAGIC)

    def test_jitter_does_not_touch_results(self):
        table = _offspring()
        before = [c.probability for c in table.cards]
        self.visualizer.create_offspring_image(table)
        assert [c.probability for c in table.cards] == before

    def test_same_seed_renders_same_image(self):
        table = _offspring()
        first = CrossVisualizer(config=FigureConfig(dpi=40), seed=3).create_offspring_image(table)
        second = CrossVisualizer(config=FigureConfig(dpi=40), seed=3).create_offspring_image(table)
        assert first == second
