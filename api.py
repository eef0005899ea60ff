"""
Punnett Engine - Flask REST API
웹 서비스용 API 엔드포인트

실행: flask --app api run --debug
또는: python api.py
"""

from flask import Flask, jsonify, request
from flask_cors import CORS

from punnett_engine import (
    EYE_COLOR, HAIR_TYPE, DEFAULT_TRAITS, PARENT_INPUTS,
    CrossEngine,
    PunnettSquare, OffspringTable,
    CrossVisualizer, LogicValidator,
    InvalidGenotype, validate_genotype,
    HOW_IT_WORKS
)

app = Flask(__name__)
CORS(app)  # CORS 활성화

# 전역 객체
visualizer = CrossVisualizer()
validator = LogicValidator()

TRAIT_MAP = {
    'eye': EYE_COLOR,
    'hair': HAIR_TYPE,
}


def _request_body():
    """JSON 요청 본문 (본문 없음 -> 빈 딕셔너리, 객체가 아니면 None)"""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data if isinstance(data, dict) else None


def _bad_body():
    return jsonify({
        'success': False,
        'error': '요청 본문은 JSON 객체여야 함'
    }), 400


@app.route('/')
def index():
    """API 정보"""
    return jsonify({
        'name': 'Punnett Engine API',
        'version': '1.0.0',
        'description': '멘델 교배 시뮬레이션 API',
        'endpoints': {
            '/traits': 'GET - 사용 가능한 형질 목록',
            '/cross': 'POST - 단일 유전자 교배',
            '/simulate': 'POST - 두 형질 교배 + 결합 자손'
        }
    })


@app.route('/traits', methods=['GET'])
def get_traits():
    """사용 가능한 형질 목록"""
    traits = [
        dict(id=key, **trait.to_dict())
        for key, trait in TRAIT_MAP.items()
    ]
    return jsonify({'traits': traits, 'how_it_works': HOW_IT_WORKS})


@app.route('/cross', methods=['POST'])
def cross():
    """
    단일 유전자 교배

    Request Body:
    {
        "parent1": "Bb",
        "parent2": "Bb",
        "trait": "eye"        // eye / hair (선택, 기본 eye)
    }
    """
    try:
        data = _request_body()
        if data is None:
            return _bad_body()

        trait = TRAIT_MAP.get(data.get('trait', 'eye'))
        if trait is None:
            return jsonify({
                'success': False,
                'error': f"알 수 없는 형질: {data.get('trait')}"
            }), 400

        p1 = validate_genotype(data.get('parent1', ''), trait)
        p2 = validate_genotype(data.get('parent2', ''), trait)

        square = PunnettSquare.build(trait, p1, p2)

        return jsonify({
            'success': True,
            'trait': trait.to_dict(),
            'results': [r.to_dict() for r in square.results],
            'phenotype_ratio': CrossEngine.phenotype_distribution(square.results),
            'punnett': square.to_dict()
        })

    except InvalidGenotype as e:
        return jsonify({
            'success': False,
            'error': str(e)
        }), 400

    except Exception as e:
        app.logger.exception("cross failed")
        return jsonify({
            'success': False,
            'error': str(e)
        }), 500


@app.route('/simulate', methods=['POST'])
def simulate():
    """
    두 형질 교배 시뮬레이션

    Request Body:
    {
        "eye1": "Bb", "eye2": "Bb",      // 눈 색 부모
        "hair1": "Cc", "hair2": "Cc",    // 머리카락 부모
        "images": false                  // 그림 생성 여부 (선택)
    }
    """
    try:
        data = _request_body()
        if data is None:
            return _bad_body()

        parents = {
            'eye1': data.get('eye1', 'Bb'),
            'eye2': data.get('eye2', 'Bb'),
            'hair1': data.get('hair1', 'Cc'),
            'hair2': data.get('hair2', 'Cc'),
        }

        # 입력 검증 (잘못된 입력을 모두 보고)
        input_report = validator.validate_inputs(parents, PARENT_INPUTS)
        if not input_report.is_valid:
            return jsonify({
                'success': False,
                'error': '입력 검증 실패',
                'validation_errors': [
                    {'message': e.message, 'details': e.details}
                    for e in input_report.get_errors()
                ]
            }), 400

        eye1, eye2 = parents['eye1'], parents['eye2']
        hair1, hair2 = parents['hair1'], parents['hair2']

        eye_square = PunnettSquare.build(EYE_COLOR, eye1, eye2)
        hair_square = PunnettSquare.build(HAIR_TYPE, hair1, hair2)
        offspring = OffspringTable.build(
            eye_square.results, hair_square.results, traits=DEFAULT_TRAITS
        )

        # 검증
        validation = validator.validate_joint([c.offspring for c in offspring.cards])

        if not validation.is_valid:
            return jsonify({
                'success': False,
                'error': '논리 검증 실패',
                'validation_errors': [
                    {'message': e.message, 'details': e.details}
                    for e in validation.get_errors()
                ]
            }), 500

        response = {
            'success': True,
            'parents': {
                'eye': [eye1, eye2],
                'hair': [hair1, hair2]
            },
            'results': {
                'eye': [r.to_dict() for r in eye_square.results],
                'hair': [r.to_dict() for r in hair_square.results]
            },
            'punnett': {
                'eye': eye_square.to_dict(),
                'hair': hair_square.to_dict()
            },
            'offspring': offspring.to_dict()
        }

        if data.get('images'):
            response['images'] = {
                'eye': f"data:image/png;base64,{visualizer.create_punnett_image(eye_square)}",
                'hair': f"data:image/png;base64,{visualizer.create_punnett_image(hair_square)}",
                'offspring': (
                    f"data:image/png;base64,"
                    f"{visualizer.create_offspring_image(offspring)}"
                )
            }

        return jsonify(response)

    except Exception as e:
        app.logger.exception("simulate failed")
        return jsonify({
            'success': False,
            'error': str(e)
        }), 500


if __name__ == '__main__':
    print("=" * 50)
    print("Punnett Engine API Server")
    print("=" * 50)
    print("Server starting at http://localhost:5000")
    print()
    app.run(debug=True, host='0.0.0.0', port=5000)
