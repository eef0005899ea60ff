"""
models.py - 핵심 데이터 모델 정의
Trait, GeneResult, JointOffspring 클래스
"""

import string
from dataclasses import dataclass
from typing import Dict, Any, Tuple


def starts_dominant(genotype: str) -> bool:
    """유전자형 첫 글자가 대문자(A-Z)인지 확인"""
    return bool(genotype) and genotype[0] in string.ascii_uppercase


class InvalidGenotype(ValueError):
    """잘못된 유전자형 입력"""

    def __init__(self, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"잘못된 유전자형 {value!r}: {reason}")


@dataclass(frozen=True)
class Trait:
    """
    형질 클래스
    - name: 형질 이름 (예: 'Eye Color')
    - symbol: 유전자 기호 (예: 'B')
    - dominant_trait: 우성 표현형 이름 (예: 'Brown Eyes')
    - recessive_trait: 열성 표현형 이름 (예: 'Blue Eyes')
    """
    name: str
    symbol: str
    dominant_trait: str
    recessive_trait: str

    @property
    def dominant_allele(self) -> str:
        return self.symbol.upper()

    @property
    def recessive_allele(self) -> str:
        return self.symbol.lower()

    @property
    def alleles(self) -> Tuple[str, str]:
        """가능한 대립유전자 반환"""
        return (self.dominant_allele, self.recessive_allele)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'symbol': self.symbol,
            'dominant_allele': self.dominant_allele,
            'recessive_allele': self.recessive_allele,
            'dominant_trait': self.dominant_trait,
            'recessive_trait': self.recessive_trait,
        }


# 기본 형질 (눈 색, 머리카락)
EYE_COLOR = Trait(
    name="Eye Color",
    symbol="B",
    dominant_trait="Brown Eyes",
    recessive_trait="Blue Eyes"
)

HAIR_TYPE = Trait(
    name="Hair Type",
    symbol="C",
    dominant_trait="Curly Hair",
    recessive_trait="Straight Hair"
)

DEFAULT_TRAITS = (EYE_COLOR, HAIR_TYPE)

# 시뮬레이션 입력 이름 -> 형질
PARENT_INPUTS = {
    'eye1': EYE_COLOR,
    'eye2': EYE_COLOR,
    'hair1': HAIR_TYPE,
    'hair2': HAIR_TYPE,
}


@dataclass(frozen=True)
class GeneResult:
    """
    단일 유전자 교배 결과의 한 항목
    - genotype: 정규화된 유전자형 (우성 대립유전자가 앞)
    - probability: 출현 확률 (count / 전체 조합 수)
    - phenotype: 표현형 이름
    - count: 조합 내 출현 횟수
    """
    genotype: str
    probability: float
    phenotype: str
    count: int = 1

    @property
    def is_dominant(self) -> bool:
        """첫 번째 대립유전자가 대문자면 우성 표현형"""
        return starts_dominant(self.genotype)

    @property
    def is_homozygous(self) -> bool:
        return len(self.genotype) == 2 and self.genotype[0] == self.genotype[1]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'genotype': self.genotype,
            'probability': self.probability,
            'phenotype': self.phenotype,
            'count': self.count,
        }


@dataclass(frozen=True)
class JointOffspring:
    """
    두 독립 형질의 결합 자손 (Cartesian product 한 칸)
    """
    first: GeneResult
    second: GeneResult

    @property
    def probability(self) -> float:
        """결합 확률 = 각 형질 확률의 곱 (독립 가정)"""
        return self.first.probability * self.second.probability

    @property
    def genotypes(self) -> Tuple[str, str]:
        return (self.first.genotype, self.second.genotype)

    @property
    def phenotypes(self) -> Tuple[str, str]:
        return (self.first.phenotype, self.second.phenotype)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'genotypes': list(self.genotypes),
            'phenotypes': list(self.phenotypes),
            'probability': self.probability,
            'components': [self.first.to_dict(), self.second.to_dict()],
        }

    def __repr__(self):
        return (f"JointOffspring({self.first.genotype}+{self.second.genotype}, "
                f"p={self.probability:.4f})")
