"""
Tests for Punnett square and offspring table building.
"""

from punnett_engine import (
    EYE_COLOR, HAIR_TYPE,
    PunnettSquare, OffspringTable,
    CrossEngine,
    format_percent, allele_badge_color
)


class TestFormatPercent:
    def test_whole_numbers(self):
        assert format_percent(0.25) == "25%"
        assert format_percent(1.0) == "100%"

    def test_rounds_half_up(self):
        assert format_percent(0.125) == "13%"
        assert format_percent(0.0625) == "6%"

    def test_thirds(self):
        assert format_percent(1 / 3) == "33%"


class TestBadgeColor:
    def test_colors(self):
        assert allele_badge_color("BB") == "#3b82f6"
        assert allele_badge_color("Bb") == "#16a34a"
        assert allele_badge_color("bb") == "#16a34a"


class TestPunnettSquare:
    def test_grid_layout(self):
        square = PunnettSquare.build(EYE_COLOR, "Bb", "bb")
        assert square.header == ["b", "b"]
        assert [[c.genotype for c in row] for row in square.rows] == [["Bb", "Bb"], ["bb", "bb"]]
        assert [row[0].row_allele for row in square.rows] == ["B", "b"]

    def test_cells_carry_phenotype(self):
        square = PunnettSquare.build(EYE_COLOR, "Bb", "Bb")
        cell = square.rows[1][0]
        assert cell.genotype == "Bb"
        assert cell.phenotype == "Brown Eyes"
        assert cell.is_dominant
        assert not square.rows[1][1].is_dominant

    def test_results_match_engine(self):
        square = PunnettSquare.build(HAIR_TYPE, "Cc", "cc")
        assert square.results == CrossEngine.analyze_trait(HAIR_TYPE, "Cc", "cc")

    def test_title(self):
        square = PunnettSquare.build(EYE_COLOR, "Bb", "bb")
        assert square.title == "Eye Color - Parent 1: Bb × Parent 2: bb"

    def test_breakdown(self):
        square = PunnettSquare.build(EYE_COLOR, "Bb", "Bb")
        assert square.breakdown_lines() == [
            "BB  25%  Brown Eyes",
            "Bb  50%  Brown Eyes",
            "bb  25%  Blue Eyes",
        ]

    def test_markdown(self):
        lines = PunnettSquare.build(EYE_COLOR, "Bb", "bb").to_markdown().splitlines()
        assert lines[0] == "|  | b | b |"
        assert lines[1] == "|---|---|---|"
        assert lines[2] == "| **B** | Bb (Brown Eyes) | Bb (Brown Eyes) |"
        assert len(lines) == 4

    def test_to_dict(self):
        data = PunnettSquare.build(EYE_COLOR, "BB", "bb").to_dict()
        assert data['parent1'] == "BB"
        assert len(data['rows']) == 2
        assert data['rows'][0]['cells'][0] == {
            'genotype': "Bb", 'phenotype': "Brown Eyes", 'dominant': True
        }
        assert data['results'] == [
            {'genotype': "Bb", 'probability': 1.0, 'phenotype': "Brown Eyes", 'count': 4}
        ]


class TestOffspringTable:
    def setup_method(self):
        eye = CrossEngine.analyze_trait(EYE_COLOR, "Bb", "Bb")
        hair = CrossEngine.analyze_trait(HAIR_TYPE, "Cc", "Cc")
        self.table = OffspringTable.build(eye, hair, traits=[EYE_COLOR, HAIR_TYPE])

    def test_card_count(self):
        assert len(self.table.cards) == 9

    def test_card_dict(self):
        card = self.table.to_dict()[1]
        assert card['genotypes'] == ["BB", "Cc"]
        assert card['percents'] == ["25%", "50%"]
        assert card['joint_percent'] == "13%"
        assert card['badges'] == ["#3b82f6", "#16a34a"]

    def test_markdown(self):
        lines = self.table.to_markdown().splitlines()
        assert lines[0] == "| Eye Color | Hair Type | Phenotype | Joint Probability |"
        assert len(lines) == 11
        assert "Brown Eyes + Curly Hair" in lines[2]

    def test_empty_markdown(self):
        assert OffspringTable().to_markdown() == ""
