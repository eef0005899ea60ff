"""
validator.py - 논리 검증 모듈
입력 유전자형 형식 검사 및 교배 결과의 확률/표현형 정합성 검증
"""

import string
from typing import List, Dict, Optional, Sequence
from dataclasses import dataclass, field
from enum import Enum

from .models import GeneResult, JointOffspring, Trait, InvalidGenotype, starts_dominant


PROBABILITY_TOLERANCE = 1e-9


class ValidationLevel(Enum):
    """검증 레벨"""
    ERROR = "ERROR"      # 치명적 오류 (불변 조건 위반)
    WARNING = "WARNING"  # 경고 (드문 케이스)
    INFO = "INFO"        # 정보


@dataclass
class ValidationResult:
    """검증 결과"""
    is_valid: bool
    level: ValidationLevel
    message: str
    details: Dict = field(default_factory=dict)

    def __str__(self):
        return f"[{self.level.value}] {self.message}"


@dataclass
class ValidationReport:
    """전체 검증 보고서"""
    results: List[ValidationResult] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """에러가 없으면 유효"""
        return not any(
            r.level == ValidationLevel.ERROR and not r.is_valid
            for r in self.results
        )

    @property
    def error_count(self) -> int:
        return sum(1 for r in self.results
                   if r.level == ValidationLevel.ERROR and not r.is_valid)

    @property
    def warning_count(self) -> int:
        return sum(1 for r in self.results
                   if r.level == ValidationLevel.WARNING and not r.is_valid)

    def add_result(self, result: ValidationResult):
        self.results.append(result)

    def extend(self, other: 'ValidationReport'):
        self.results.extend(other.results)

    def get_errors(self) -> List[ValidationResult]:
        return [r for r in self.results
                if r.level == ValidationLevel.ERROR and not r.is_valid]

    def get_warnings(self) -> List[ValidationResult]:
        return [r for r in self.results
                if r.level == ValidationLevel.WARNING and not r.is_valid]

    def to_dict(self) -> Dict:
        return {
            'is_valid': self.is_valid,
            'error_count': self.error_count,
            'warning_count': self.warning_count,
            'results': [
                {
                    'valid': r.is_valid,
                    'level': r.level.value,
                    'message': r.message,
                    'details': r.details
                }
                for r in self.results
            ]
        }

    def __str__(self):
        lines = [
            "=== 검증 보고서 ===",
            f"전체 결과: {'✓ 유효' if self.is_valid else '✗ 무효'}",
            f"오류: {self.error_count}, 경고: {self.warning_count}",
            ""
        ]

        if self.results:
            lines.append("상세 결과:")
            for r in self.results:
                status = "✓" if r.is_valid else "✗"
                lines.append(f"  {status} [{r.level.value}] {r.message}")

        return "\n".join(lines)


def validate_genotype(value: str, trait: Optional[Trait] = None) -> str:
    """
    부모 유전자형 문자열 검사

    정확히 두 글자의 영문자여야 하며, 형질이 주어지면
    두 글자 모두 해당 형질의 유전자 기호(대/소문자)여야 한다.

    Raises:
        InvalidGenotype: 형식이 맞지 않을 때
    """
    if not isinstance(value, str):
        raise InvalidGenotype(repr(value), "문자열이 아님")
    if len(value) != 2:
        raise InvalidGenotype(value, f"대립유전자는 2개여야 함 (현재 {len(value)}개)")
    for allele in value:
        if allele not in string.ascii_letters:
            raise InvalidGenotype(value, f"영문자가 아닌 대립유전자: {allele!r}")
    if trait is not None:
        for allele in value:
            if allele not in trait.alleles:
                raise InvalidGenotype(
                    value,
                    f"{trait.name}의 대립유전자는 {trait.dominant_allele}/"
                    f"{trait.recessive_allele}만 가능"
                )
    return value


class LogicValidator:
    """
    교배 논리 검증 클래스

    검증 항목:
    1. 부모 유전자형 형식
    2. 확률 합 = 1
    3. 표현형 결정 규칙
    4. 결합 분포 확률 합
    """

    def validate_inputs(
        self,
        parents: Dict[str, str],
        traits: Optional[Dict[str, Trait]] = None
    ) -> ValidationReport:
        """
        부모 유전자형 입력 검증 (예외 대신 보고서로 반환)

        모든 입력을 검사하므로 잘못된 입력이 여러 개면 한 번에 보고된다.

        Args:
            parents: {입력 이름: 유전자형} 딕셔너리
            traits: {입력 이름: 형질} 대립유전자 기호 검사용 (선택)
        """
        traits = traits or {}
        report = ValidationReport()

        for name, value in parents.items():
            try:
                validate_genotype(value, traits.get(name))
            except InvalidGenotype as e:
                report.add_result(ValidationResult(
                    is_valid=False,
                    level=ValidationLevel.ERROR,
                    message=f"{name}: {e}",
                    details={'input': name, 'value': e.value, 'reason': e.reason}
                ))

        if report.error_count == 0:
            report.add_result(ValidationResult(
                is_valid=True,
                level=ValidationLevel.INFO,
                message="입력 유전자형 검증 통과"
            ))

        return report

    def validate_results(
        self,
        results: Sequence[GeneResult],
        dominant_trait: Optional[str] = None,
        recessive_trait: Optional[str] = None
    ) -> ValidationReport:
        """단일 유전자 교배 결과 검증"""
        report = ValidationReport()

        if not results:
            report.add_result(ValidationResult(
                is_valid=False,
                level=ValidationLevel.ERROR,
                message="교배 결과가 비어 있음"
            ))
            return report

        # 확률 합
        total = sum(r.probability for r in results)
        if abs(total - 1.0) > PROBABILITY_TOLERANCE:
            report.add_result(ValidationResult(
                is_valid=False,
                level=ValidationLevel.ERROR,
                message=f"확률 합이 1이 아님: {total}",
                details={'total': total}
            ))

        # 중복 유전자형
        seen = set()
        for r in results:
            if r.genotype in seen:
                report.add_result(ValidationResult(
                    is_valid=False,
                    level=ValidationLevel.ERROR,
                    message=f"유전자형 {r.genotype} 중복",
                    details={'genotype': r.genotype}
                ))
            seen.add(r.genotype)

            if not 0.0 < r.probability <= 1.0:
                report.add_result(ValidationResult(
                    is_valid=False,
                    level=ValidationLevel.ERROR,
                    message=f"{r.genotype}의 확률 범위 오류: {r.probability}",
                    details={'genotype': r.genotype, 'probability': r.probability}
                ))

        # 표현형 규칙
        if dominant_trait is not None and recessive_trait is not None:
            for r in results:
                expected = dominant_trait if starts_dominant(r.genotype) else recessive_trait
                if r.phenotype != expected:
                    report.add_result(ValidationResult(
                        is_valid=False,
                        level=ValidationLevel.ERROR,
                        message=(f"{r.genotype}의 표현형 오류: "
                                 f"{r.phenotype} (예상: {expected})"),
                        details={
                            'genotype': r.genotype,
                            'phenotype': r.phenotype,
                            'expected': expected
                        }
                    ))

        # 서로 다른 글자가 섞인 유전자형 (다른 형질의 대립유전자 혼입)
        for r in results:
            if len(set(r.genotype.lower())) > 1:
                report.add_result(ValidationResult(
                    is_valid=False,
                    level=ValidationLevel.WARNING,
                    message=f"{r.genotype}: 서로 다른 유전자 기호가 섞여 있음",
                    details={'genotype': r.genotype}
                ))

        if report.error_count == 0:
            report.add_result(ValidationResult(
                is_valid=True,
                level=ValidationLevel.INFO,
                message="교배 결과 검증 통과"
            ))

        return report

    def validate_joint(self, joint: Sequence[JointOffspring]) -> ValidationReport:
        """결합 분포 검증"""
        report = ValidationReport()

        total = sum(j.probability for j in joint)
        if abs(total - 1.0) > PROBABILITY_TOLERANCE:
            report.add_result(ValidationResult(
                is_valid=False,
                level=ValidationLevel.ERROR,
                message=f"결합 확률 합이 1이 아님: {total}",
                details={'total': total, 'size': len(joint)}
            ))
        else:
            report.add_result(ValidationResult(
                is_valid=True,
                level=ValidationLevel.INFO,
                message=f"결합 분포 검증 통과 ({len(joint)}개 조합)"
            ))

        return report


def validate_logic(
    results: Sequence[GeneResult],
    dominant_trait: Optional[str] = None,
    recessive_trait: Optional[str] = None
) -> ValidationReport:
    """
    편의 함수: 교배 결과 검증 수행
    """
    validator = LogicValidator()
    return validator.validate_results(results, dominant_trait, recessive_trait)
