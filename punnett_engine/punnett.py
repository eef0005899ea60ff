"""
punnett.py - 퍼넷 사각형 및 자손 표 생성기
교배 엔진 결과를 표/마크다운 형태로 변환
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List, Dict, Any, Sequence
from dataclasses import dataclass, field

from .models import GeneResult, JointOffspring, Trait, starts_dominant
from .genetics import CrossEngine


DOMINANT_BADGE_COLOR = "#3b82f6"
RECESSIVE_BADGE_COLOR = "#16a34a"

HOW_IT_WORKS = (
    "Dominant genes (B, C): only one copy needed to show the trait "
    "(brown eyes, curly hair).\n"
    "Recessive genes (b, c): two copies needed to show the trait "
    "(blue eyes, straight hair).\n"
    "Each parent contributes one allele per gene, and the combinations decide "
    "the physical traits. Punnett squares show the probabilities, while the "
    "offspring grid shows all possible trait combinations."
)


def format_percent(probability: float) -> str:
    """확률 -> 정수 퍼센트 문자열 (반올림, 0.125 -> '13%')"""
    value = Decimal(str(probability * 100)).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
    return f"{value}%"


def allele_badge_color(genotype: str) -> str:
    """유전자형 배지 색상 (전부 대문자면 파랑, 아니면 초록)"""
    return DOMINANT_BADGE_COLOR if genotype == genotype.upper() else RECESSIVE_BADGE_COLOR


@dataclass
class PunnettCell:
    """퍼넷 사각형의 개별 칸"""
    row_allele: str
    col_allele: str
    genotype: str
    phenotype: str

    @property
    def is_dominant(self) -> bool:
        return starts_dominant(self.genotype)


@dataclass
class PunnettSquare:
    """
    퍼넷 사각형 전체
    - 행: 부모 1의 대립유전자
    - 열: 부모 2의 대립유전자
    """
    trait: Trait
    parent1: str
    parent2: str
    rows: List[List[PunnettCell]] = field(default_factory=list)
    results: List[GeneResult] = field(default_factory=list)

    @classmethod
    def build(cls, trait: Trait, parent1: str, parent2: str) -> 'PunnettSquare':
        """교배 엔진으로 퍼넷 사각형 생성"""
        square = cls(trait=trait, parent1=parent1, parent2=parent2)

        for a1 in parent1:
            row = []
            for a2 in parent2:
                genotype = CrossEngine.canonicalize(a1, a2)
                row.append(PunnettCell(
                    row_allele=a1,
                    col_allele=a2,
                    genotype=genotype,
                    phenotype=CrossEngine.classify_phenotype(
                        genotype, trait.dominant_trait, trait.recessive_trait
                    )
                ))
            square.rows.append(row)

        square.results = CrossEngine.analyze_trait(trait, parent1, parent2)
        return square

    @property
    def title(self) -> str:
        return f"{self.trait.name} - Parent 1: {self.parent1} × Parent 2: {self.parent2}"

    @property
    def header(self) -> List[str]:
        return list(self.parent2)

    @property
    def cells(self) -> List[PunnettCell]:
        return [cell for row in self.rows for cell in row]

    def breakdown_lines(self) -> List[str]:
        """유전자형/표현형 분석 요약"""
        return [
            f"{r.genotype}  {format_percent(r.probability)}  {r.phenotype}"
            for r in self.results
        ]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'title': self.title,
            'trait': self.trait.to_dict(),
            'parent1': self.parent1,
            'parent2': self.parent2,
            'header': self.header,
            'rows': [
                {
                    'allele': row[0].row_allele if row else "",
                    'cells': [
                        {
                            'genotype': cell.genotype,
                            'phenotype': cell.phenotype,
                            'dominant': cell.is_dominant
                        }
                        for cell in row
                    ]
                }
                for row in self.rows
            ],
            'results': [r.to_dict() for r in self.results],
        }

    def to_markdown(self) -> str:
        """마크다운 표 형식으로 변환"""
        headers = [""] + self.header
        header_line = "| " + " | ".join(headers) + " |"
        separator = "|" + "|".join(["---"] * len(headers)) + "|"

        data_lines = []
        for row in self.rows:
            cells = [f"**{row[0].row_allele}**" if row else ""]
            for cell in row:
                cells.append(f"{cell.genotype} ({cell.phenotype})")
            data_lines.append("| " + " | ".join(cells) + " |")

        return "\n".join([header_line, separator] + data_lines)


@dataclass
class OffspringCard:
    """결합 자손 카드 (두 형질)"""
    offspring: JointOffspring

    @property
    def probability(self) -> float:
        return self.offspring.probability

    def to_dict(self) -> Dict[str, Any]:
        first, second = self.offspring.first, self.offspring.second
        return {
            'genotypes': list(self.offspring.genotypes),
            'phenotypes': list(self.offspring.phenotypes),
            'percents': [format_percent(first.probability),
                         format_percent(second.probability)],
            'badges': [allele_badge_color(first.genotype),
                       allele_badge_color(second.genotype)],
            'probability': self.probability,
            'joint_percent': format_percent(self.probability),
        }


@dataclass
class OffspringTable:
    """결합 자손 표 전체"""
    traits: List[Trait] = field(default_factory=list)
    cards: List[OffspringCard] = field(default_factory=list)
    title: str = "Combined Offspring"

    @classmethod
    def build(
        cls,
        first_results: Sequence[GeneResult],
        second_results: Sequence[GeneResult],
        traits: Sequence[Trait] = ()
    ) -> 'OffspringTable':
        table = cls(traits=list(traits))
        for offspring in CrossEngine.joint_distribution(first_results, second_results):
            table.cards.append(OffspringCard(offspring=offspring))
        return table

    def to_dict(self) -> List[Dict[str, Any]]:
        return [card.to_dict() for card in self.cards]

    def to_markdown(self) -> str:
        """마크다운 표 형식으로 변환"""
        if not self.cards:
            return ""

        names = [t.name for t in self.traits] or ["Trait 1", "Trait 2"]
        headers = names + ["Phenotype", "Joint Probability"]
        header_line = "| " + " | ".join(headers) + " |"
        separator = "|" + "|".join(["---"] * len(headers)) + "|"

        data_lines = []
        for card in self.cards:
            first, second = card.offspring.first, card.offspring.second
            cells = [
                f"{first.genotype} ({format_percent(first.probability)})",
                f"{second.genotype} ({format_percent(second.probability)})",
                f"{first.phenotype} + {second.phenotype}",
                format_percent(card.probability),
            ]
            data_lines.append("| " + " | ".join(cells) + " |")

        return "\n".join([header_line, separator] + data_lines)
