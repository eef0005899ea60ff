"""
Punnett Engine - 사용 예시
다양한 교배 시나리오
"""

from punnett_engine import (
    EYE_COLOR, HAIR_TYPE,
    Trait,
    CrossEngine,
    PunnettSquare, OffspringTable,
    CrossVisualizer, FigureConfig,
    LogicValidator,
    format_percent
)


def example_1_monohybrid():
    """
    예시 1: 이형접합 x 이형접합 (Bb x Bb)
    - 1:2:1 유전자형 비, 3:1 표현형 비
    """
    print("\n" + "="*60)
    print("예시 1: 단성 잡종 교배 (Bb x Bb)")
    print("="*60)

    print(f"\n조합: {CrossEngine.combine('Bb', 'Bb')}")

    results = CrossEngine.analyze_trait(EYE_COLOR, "Bb", "Bb")

    print("\n【유전자형 분포】")
    for r in results:
        print(f"  {r.genotype}: {format_percent(r.probability)} ({r.phenotype})")

    print("\n【표현형 분포】")
    for phenotype, p in CrossEngine.phenotype_distribution(results).items():
        print(f"  {phenotype}: {format_percent(p)}")

    validator = LogicValidator()
    report = validator.validate_results(
        results, EYE_COLOR.dominant_trait, EYE_COLOR.recessive_trait
    )
    print(f"\n【검증 결과】: {'✓ 통과' if report.is_valid else '✗ 실패'}")


def example_2_homozygous_cross():
    """
    예시 2: 우성 동형접합 x 열성 동형접합 (BB x bb)
    - 모든 자손이 Bb
    """
    print("\n" + "="*60)
    print("예시 2: 동형접합 교배 (BB x bb)")
    print("="*60)

    square = PunnettSquare.build(EYE_COLOR, "BB", "bb")

    print(f"\n【{square.title}】")
    print(square.to_markdown())

    print("\n【요약】")
    for line in square.breakdown_lines():
        print(f"  • {line}")


def example_3_dihybrid():
    """
    예시 3: 두 형질 결합 분포 (Bb x Bb, Cc x Cc)
    - 9개 조합, 확률 합 1
    """
    print("\n" + "="*60)
    print("예시 3: 두 형질 결합 분포")
    print("="*60)

    eye = CrossEngine.analyze_trait(EYE_COLOR, "Bb", "Bb")
    hair = CrossEngine.analyze_trait(HAIR_TYPE, "Cc", "Cc")

    table = OffspringTable.build(eye, hair, traits=[EYE_COLOR, HAIR_TYPE])
    print()
    print(table.to_markdown())

    matrix = CrossEngine.probability_matrix(eye, hair)
    print(f"\n확률 행렬 합: {matrix.sum():.3f}")

    report = LogicValidator().validate_joint([c.offspring for c in table.cards])
    print(f"\n【검증 결과】: {'✓ 통과' if report.is_valid else '✗ 실패'}")


def example_4_visualization():
    """
    예시 4: 퍼넷 사각형 / 결합 자손 그림 저장
    """
    print("\n" + "="*60)
    print("예시 4: 시각화")
    print("="*60)

    visualizer = CrossVisualizer(
        config=FigureConfig(cards_per_row=3, dpi=100),
        seed=42
    )

    eye_square = PunnettSquare.build(EYE_COLOR, "Bb", "bb")
    hair_square = PunnettSquare.build(HAIR_TYPE, "Cc", "Cc")
    offspring = OffspringTable.build(
        eye_square.results, hair_square.results, traits=[EYE_COLOR, HAIR_TYPE]
    )

    visualizer.create_punnett_image(eye_square, save_path="output/example_punnett_eye.png")
    print("✓ 퍼넷 사각형 저장: output/example_punnett_eye.png")

    visualizer.create_offspring_image(offspring, save_path="output/example_offspring.png")
    print("✓ 결합 자손 저장: output/example_offspring.png")


def example_5_custom_trait():
    """
    예시 5: 사용자 정의 형질
    - 기본 형질 외의 단일 유전자 형질
    """
    print("\n" + "="*60)
    print("예시 5: 사용자 정의 형질 (혀 말기)")
    print("="*60)

    tongue = Trait(
        name="Tongue Rolling",
        symbol="R",
        dominant_trait="Roller",
        recessive_trait="Non-roller"
    )

    square = PunnettSquare.build(tongue, "Rr", "rr")
    print()
    print(square.to_markdown())
    for line in square.breakdown_lines():
        print(f"  • {line}")


def main():
    """모든 예시 실행"""
    import os
    os.makedirs("output", exist_ok=True)

    print("\n" + "#"*60)
    print("# Punnett Engine - 사용 예시")
    print("#"*60)

    example_1_monohybrid()
    example_2_homozygous_cross()
    example_3_dihybrid()
    example_4_visualization()
    example_5_custom_trait()

    print("\n" + "="*60)
    print("모든 예시 실행 완료!")
    print("="*60)


if __name__ == "__main__":
    main()
