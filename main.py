"""
Punnett Engine - 멘델 교배 시뮬레이터
메인 실행 파일

사용법:
    python main.py                              # 기본 (Bb x Bb, Cc x Cc)
    python main.py --eye1 BB --eye2 bb          # 눈 색 부모 지정
    python main.py --hair1 Cc --hair2 cc        # 머리카락 부모 지정
    python main.py --save --output out          # 결과 저장
"""

import argparse
import json
import os
import sys
from datetime import datetime
from typing import Optional

from punnett_engine import (
    EYE_COLOR, HAIR_TYPE, PARENT_INPUTS,
    CrossEngine,
    PunnettSquare, OffspringTable,
    CrossVisualizer,
    LogicValidator,
    HOW_IT_WORKS
)


class PunnettSimulator:
    """
    Punnett Engine 메인 클래스
    교배 시뮬레이션 실행 및 결과 관리
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Args:
            seed: 그림 흔들림용 랜덤 시드 (교배 결과와 무관)
        """
        self.visualizer = CrossVisualizer(seed=seed)
        self.validator = LogicValidator()

    def simulate(
        self,
        eye1: str = "Bb",
        eye2: str = "Bb",
        hair1: str = "Cc",
        hair2: str = "Cc",
        images: bool = True
    ) -> dict:
        """
        두 형질 교배 시뮬레이션

        Args:
            eye1, eye2: 눈 색 부모 유전자형
            hair1, hair2: 머리카락 부모 유전자형
            images: 그림 생성 여부

        Returns:
            결과 데이터 딕셔너리 (입력 오류 시 success=False)
        """
        print(f"\n{'='*50}")
        print("🧬 Punnett Engine - 교배 시뮬레이션")
        print(f"{'='*50}")
        print(f"{EYE_COLOR.name}: {eye1} × {eye2}")
        print(f"{HAIR_TYPE.name}: {hair1} × {hair2}")
        print()

        # 입력 검증 (잘못된 입력을 모두 보고)
        input_report = self.validator.validate_inputs(
            {'eye1': eye1, 'eye2': eye2, 'hair1': hair1, 'hair2': hair2},
            PARENT_INPUTS
        )
        if not input_report.is_valid:
            print("❌ 입력 검증 실패")
            return {
                'success': False,
                'error': '입력 검증 실패',
                'validation': input_report.to_dict()
            }

        # 형질별 퍼넷 사각형
        eye_square = PunnettSquare.build(EYE_COLOR, eye1, eye2)
        hair_square = PunnettSquare.build(HAIR_TYPE, hair1, hair2)
        print("✓ 퍼넷 사각형 계산 완료")

        # 결합 자손
        offspring = OffspringTable.build(
            eye_square.results, hair_square.results,
            traits=[EYE_COLOR, HAIR_TYPE]
        )
        print(f"✓ 결합 자손 계산 완료: {len(offspring.cards)}개 조합")

        # 논리 검증
        report = self.validator.validate_results(
            eye_square.results, EYE_COLOR.dominant_trait, EYE_COLOR.recessive_trait
        )
        report.extend(self.validator.validate_results(
            hair_square.results, HAIR_TYPE.dominant_trait, HAIR_TYPE.recessive_trait
        ))
        report.extend(self.validator.validate_joint(
            [card.offspring for card in offspring.cards]
        ))
        print(f"✓ 논리 검증 완료: {'통과' if report.is_valid else '실패'}")

        result = {
            'success': True,
            'timestamp': datetime.now().isoformat(),
            'parents': {
                'eye': [eye1, eye2],
                'hair': [hair1, hair2]
            },
            'punnett': {
                'eye': eye_square.to_dict(),
                'hair': hair_square.to_dict()
            },
            'phenotype_ratio': {
                'eye': CrossEngine.phenotype_distribution(eye_square.results),
                'hair': CrossEngine.phenotype_distribution(hair_square.results)
            },
            'offspring': offspring.to_dict(),
            'markdown': {
                'eye': eye_square.to_markdown(),
                'hair': hair_square.to_markdown(),
                'offspring': offspring.to_markdown()
            },
            'breakdown': {
                'eye': eye_square.breakdown_lines(),
                'hair': hair_square.breakdown_lines()
            },
            'validation': report.to_dict()
        }

        if images:
            result['images'] = {
                'eye': self.visualizer.create_punnett_image(eye_square),
                'hair': self.visualizer.create_punnett_image(hair_square),
                'offspring': self.visualizer.create_offspring_image(offspring)
            }
            print("✓ 그림 생성 완료")

        print(f"\n{'='*50}")
        print("✅ 시뮬레이션 완료!")
        print(f"{'='*50}")

        return result

    def display_result(self, result: dict):
        """결과를 콘솔에 표시"""
        if not result.get('success'):
            print(f"❌ 오류: {result.get('error')}")
            return

        print("\n【How It Works】")
        print(HOW_IT_WORKS)

        for key in ('eye', 'hair'):
            print(f"\n【{result['punnett'][key]['title']}】")
            print(result['markdown'][key])
            print("\n🔎 Genotype & Phenotype Breakdown")
            for line in result['breakdown'][key]:
                print(f"  • {line}")

        print("\n【Combined Offspring】")
        print(result['markdown']['offspring'])

    def save_result(self, result: dict, output_dir: str = "output"):
        """결과를 파일로 저장"""
        if not result.get('success'):
            print("❌ 저장할 결과가 없습니다.")
            return

        os.makedirs(output_dir, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        base_name = f"cross_{timestamp}"

        # JSON 데이터 저장 (이미지 제외)
        json_data = {k: v for k, v in result.items() if k != 'images'}
        json_path = os.path.join(output_dir, f"{base_name}.json")
        with open(json_path, 'w', encoding='utf-8') as f:
            json.dump(json_data, f, ensure_ascii=False, indent=2)
        print(f"✓ JSON 저장: {json_path}")

        import base64

        for name, img in result.get('images', {}).items():
            img_path = os.path.join(output_dir, f"{base_name}_{name}.png")
            with open(img_path, 'wb') as f:
                f.write(base64.b64decode(img))
            print(f"✓ 이미지 저장: {img_path}")


def parse_args(argv=None):
    """명령줄 인자 파싱"""
    parser = argparse.ArgumentParser(
        description="Punnett Engine - 멘델 교배 시뮬레이터"
    )

    parser.add_argument('--eye1', type=str, default='Bb',
                        help="눈 색 부모 1 유전자형 (기본: Bb)")
    parser.add_argument('--eye2', type=str, default='Bb',
                        help="눈 색 부모 2 유전자형 (기본: Bb)")
    parser.add_argument('--hair1', type=str, default='Cc',
                        help="머리카락 부모 1 유전자형 (기본: Cc)")
    parser.add_argument('--hair2', type=str, default='Cc',
                        help="머리카락 부모 2 유전자형 (기본: Cc)")

    parser.add_argument(
        '--seed', '-s',
        type=int,
        default=None,
        help="그림용 랜덤 시드"
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        default='output',
        help="출력 디렉토리 (기본: output)"
    )

    parser.add_argument(
        '--save',
        action='store_true',
        help="결과를 파일로 저장"
    )

    parser.add_argument(
        '--no-images',
        action='store_true',
        help="그림 생성 생략"
    )

    parser.add_argument(
        '--no-display',
        action='store_true',
        help="콘솔 출력 생략"
    )

    return parser.parse_args(argv)


def main(argv=None):
    """메인 함수"""
    args = parse_args(argv)

    simulator = PunnettSimulator(seed=args.seed)

    result = simulator.simulate(
        eye1=args.eye1,
        eye2=args.eye2,
        hair1=args.hair1,
        hair2=args.hair2,
        images=not args.no_images
    )

    if not result.get('success'):
        for error in result['validation']['results']:
            if not error['valid']:
                print(f"  - {error['message']}")
        sys.exit(2)

    # 출력
    if not args.no_display:
        simulator.display_result(result)

    # 저장
    if args.save:
        simulator.save_result(result, args.output)

    return result


if __name__ == "__main__":
    main()
