"""
Punnett Engine - 멘델 교배 시뮬레이터

두 독립 형질(눈 색, 머리카락)의 교배 결과와 결합 분포를 계산하는 엔진
"""

from .models import (
    Trait,
    GeneResult,
    JointOffspring,
    InvalidGenotype,
    EYE_COLOR,
    HAIR_TYPE,
    DEFAULT_TRAITS,
    PARENT_INPUTS
)

from .genetics import (
    CrossEngine,
    combine,
    analyze_gene,
    joint_distribution
)

from .punnett import (
    PunnettSquare,
    OffspringTable,
    format_percent,
    allele_badge_color,
    HOW_IT_WORKS
)

from .visualizer import (
    FigureConfig,
    CrossVisualizer,
)

from .validator import (
    LogicValidator,
    ValidationReport,
    validate_genotype,
    validate_logic
)


__version__ = "1.0.0"
__all__ = [
    # Models
    "Trait",
    "GeneResult",
    "JointOffspring",
    "InvalidGenotype",
    "EYE_COLOR",
    "HAIR_TYPE",
    "DEFAULT_TRAITS",
    "PARENT_INPUTS",

    # Genetics
    "CrossEngine",
    "combine",
    "analyze_gene",
    "joint_distribution",

    # Punnett
    "PunnettSquare",
    "OffspringTable",
    "format_percent",
    "allele_badge_color",
    "HOW_IT_WORKS",

    # Visualizer
    "FigureConfig",
    "CrossVisualizer",

    # Validator
    "LogicValidator",
    "ValidationReport",
    "validate_genotype",
    "validate_logic",
]
