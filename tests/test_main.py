"""
Tests for the command-line simulator.
"""

import json

import pytest

from main import PunnettSimulator, main, parse_args


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert (args.eye1, args.eye2, args.hair1, args.hair2) == ('Bb', 'Bb', 'Cc', 'Cc')
        assert not args.save


class TestSimulator:
    def test_simulate_without_images(self):
        result = PunnettSimulator().simulate("Bb", "bb", "Cc", "cc", images=False)
        assert result['success'] is True
        assert len(result['offspring']) == 4
        assert result['validation']['is_valid'] is True
        assert result['phenotype_ratio']['eye'] == {'Brown Eyes': 0.5, 'Blue Eyes': 0.5}
        assert 'images' not in result

    def test_simulate_reports_every_bad_parent(self):
        result = PunnettSimulator().simulate("Bx", "Bb", "Cc", "Bb", images=False)
        assert result['success'] is False
        assert result['validation']['error_count'] == 2
        bad = [r['details']['input'] for r in result['validation']['results']]
        assert bad == ['eye1', 'hair2']

    def test_display(self, capsys):
        simulator = PunnettSimulator()
        simulator.display_result(simulator.simulate(images=False))
        out = capsys.readouterr().out
        assert "Combined Offspring" in out
        assert "BB  25%  Brown Eyes" in out


class TestMain:
    def test_invalid_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(['--eye1', 'Bx', '--hair2', 'cC1', '--no-images', '--no-display'])
        assert exc.value.code == 2
        out = capsys.readouterr().out
        assert "eye1:" in out
        assert "hair2:" in out

    def test_save(self, tmp_path):
        main(['--eye1', 'BB', '--save', '--output', str(tmp_path),
              '--no-display', '--seed', '1'])
        json_files = list(tmp_path.glob('*.json'))
        png_files = list(tmp_path.glob('*.png'))
        assert len(json_files) == 1
        assert len(png_files) == 3
        data = json.loads(json_files[0].read_text(encoding='utf-8'))
        assert data['parents']['eye'] == ['BB', 'Bb']
