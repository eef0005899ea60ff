"""
Tests for the Flask API.
"""

import pytest

from api import app


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


class TestIndex:
    def test_index(self, client):
        resp = client.get('/')
        assert resp.status_code == 200
        assert resp.get_json()['name'] == 'Punnett Engine API'

    def test_traits(self, client):
        data = client.get('/traits').get_json()
        assert [t['id'] for t in data['traits']] == ['eye', 'hair']
        assert data['traits'][0]['dominant_trait'] == 'Brown Eyes'


class TestCross:
    def test_cross(self, client):
        resp = client.post('/cross', json={'parent1': 'Cc', 'parent2': 'cc', 'trait': 'hair'})
        assert resp.status_code == 200
        data = resp.get_json()
        assert [r['genotype'] for r in data['results']] == ['Cc', 'cc']
        assert data['phenotype_ratio'] == {'Curly Hair': 0.5, 'Straight Hair': 0.5}

    def test_invalid_genotype(self, client):
        resp = client.post('/cross', json={'parent1': 'Bbb', 'parent2': 'bb'})
        assert resp.status_code == 400
        assert resp.get_json()['success'] is False

    def test_unknown_trait(self, client):
        resp = client.post('/cross', json={'parent1': 'Bb', 'parent2': 'bb', 'trait': 'nose'})
        assert resp.status_code == 400

    def test_non_object_body(self, client):
        resp = client.post('/cross', json=[1])
        assert resp.status_code == 400
        assert resp.get_json()['success'] is False


class TestSimulate:
    def test_defaults(self, client):
        resp = client.post('/simulate', json={})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data['success'] is True
        assert len(data['offspring']) == 9
        assert abs(sum(o['probability'] for o in data['offspring']) - 1.0) < 1e-9
        assert 'images' not in data

    def test_explicit_parents(self, client):
        data = client.post('/simulate', json={
            'eye1': 'BB', 'eye2': 'bb', 'hair1': 'cc', 'hair2': 'cc'
        }).get_json()
        assert data['results']['eye'] == [
            {'genotype': 'Bb', 'probability': 1.0, 'phenotype': 'Brown Eyes', 'count': 4}
        ]
        assert data['offspring'][0]['phenotypes'] == ['Brown Eyes', 'Straight Hair']

    def test_images(self, client):
        data = client.post('/simulate', json={'eye1': 'BB', 'eye2': 'BB',
                                              'hair1': 'CC', 'hair2': 'CC',
                                              'images': True}).get_json()
        for key in ('eye', 'hair', 'offspring'):
            assert data['images'][key].startswith('data:image/png;base64,')

    def test_wrong_symbol(self, client):
        resp = client.post('/simulate', json={'eye1': 'Cc'})
        assert resp.status_code == 400

    def test_reports_every_bad_parent(self, client):
        resp = client.post('/simulate', json={'eye1': 'Cc', 'hair2': 'Cx'})
        assert resp.status_code == 400
        errors = resp.get_json()['validation_errors']
        assert [e['details']['input'] for e in errors] == ['eye1', 'hair2']

    def test_non_object_body(self, client):
        resp = client.post('/simulate', json=[1])
        assert resp.status_code == 400
        assert resp.get_json()['success'] is False
