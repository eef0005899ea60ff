"""
genetics.py - 멘델 교배 엔진
대립유전자 조합, 유전자형 정규화, 표현형 결정, 확률 계산
"""

from collections import Counter
from typing import List, Dict, Sequence

import numpy as np

from .models import GeneResult, JointOffspring, Trait, starts_dominant


class CrossEngine:
    """멘델 교배 엔진 (상태 없음)"""

    @staticmethod
    def canonicalize(a: str, b: str) -> str:
        """
        두 대립유전자를 하나의 유전자형으로 정렬

        대문자(우성) 대립유전자를 앞에 배치한다.
        둘 다 대문자이거나 둘 다 소문자면 입력 순서 유지.
        """
        a_upper = a == a.upper()
        b_upper = b == b.upper()
        if b_upper and not a_upper:
            return b + a
        return a + b

    @staticmethod
    def combine(parent1: str, parent2: str) -> List[str]:
        """부모 대립유전자의 모든 조합 (parent1 x parent2)"""
        return [
            CrossEngine.canonicalize(a, b)
            for a in parent1
            for b in parent2
        ]

    @staticmethod
    def classify_phenotype(genotype: str, dominant_trait: str, recessive_trait: str) -> str:
        """유전자형에서 표현형 결정"""
        return dominant_trait if starts_dominant(genotype) else recessive_trait

    @staticmethod
    def analyze_gene(
        p1: str,
        p2: str,
        dominant_trait: str,
        recessive_trait: str
    ) -> List[GeneResult]:
        """
        단일 유전자 교배 분석

        Args:
            p1: 부모 1 유전자형 (예: 'Bb')
            p2: 부모 2 유전자형
            dominant_trait: 우성 표현형 이름
            recessive_trait: 열성 표현형 이름

        Returns:
            처음 등장한 순서대로 정렬된 GeneResult 목록
        """
        combos = CrossEngine.combine(p1, p2)
        counts = Counter(combos)
        total = len(combos)

        return [
            GeneResult(
                genotype=genotype,
                probability=count / total,
                phenotype=CrossEngine.classify_phenotype(
                    genotype, dominant_trait, recessive_trait
                ),
                count=count
            )
            for genotype, count in counts.items()
        ]

    @staticmethod
    def analyze_trait(trait: Trait, p1: str, p2: str) -> List[GeneResult]:
        """형질 객체로 교배 분석"""
        return CrossEngine.analyze_gene(
            p1, p2, trait.dominant_trait, trait.recessive_trait
        )

    @staticmethod
    def joint_distribution(
        results1: Sequence[GeneResult],
        results2: Sequence[GeneResult]
    ) -> List[JointOffspring]:
        """두 독립 형질의 결합 분포 (m x n)"""
        return [
            JointOffspring(first=r1, second=r2)
            for r1 in results1
            for r2 in results2
        ]

    @staticmethod
    def probability_matrix(
        results1: Sequence[GeneResult],
        results2: Sequence[GeneResult]
    ) -> np.ndarray:
        """결합 확률 행렬 (행: 첫 번째 형질, 열: 두 번째 형질)"""
        p1 = np.array([r.probability for r in results1], dtype=float)
        p2 = np.array([r.probability for r in results2], dtype=float)
        return np.outer(p1, p2)

    @staticmethod
    def phenotype_distribution(results: Sequence[GeneResult]) -> Dict[str, float]:
        """표현형별 확률 합 (예: 3:1 분리비)"""
        distribution: Dict[str, float] = {}
        for r in results:
            distribution[r.phenotype] = distribution.get(r.phenotype, 0.0) + r.probability
        return distribution


# 모듈 수준 편의 함수
def combine(parent1: str, parent2: str) -> List[str]:
    return CrossEngine.combine(parent1, parent2)


def analyze_gene(p1: str, p2: str, dominant_trait: str, recessive_trait: str) -> List[GeneResult]:
    return CrossEngine.analyze_gene(p1, p2, dominant_trait, recessive_trait)


def joint_distribution(
    results1: Sequence[GeneResult],
    results2: Sequence[GeneResult]
) -> List[JointOffspring]:
    return CrossEngine.joint_distribution(results1, results2)
