"""
Tests for the minam command line interface
"""

import json

import pytest

from minam.cli.app import main
from minam.core.config import MinamConfig
from tests.conftest import StubClient


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Empty working directory with no discoverable config"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr('minam.cli.config_discovery.user_config_dir',
                        lambda *args, **kwargs: str(tmp_path / 'user_config'))
    (tmp_path / 'a.csv').write_text('Date,Price\n2024-01-01,42000\n2024-01-02,BTC\n')
    (tmp_path / 'b.csv').write_text('Date,Symbol\n2023-12-31,BTC\n')
    return tmp_path


@pytest.fixture
def stub_client(monkeypatch):
    client = StubClient('a.csv holds the prices.')
    monkeypatch.setattr('minam.agent.multi_file_agent.create_client',
                        lambda api_key, base_url=None: client)
    return client


class TestConnectionsCommand:
    """minam connections"""

    def test_text_output(self, workspace, capsys):
        exit_code = main(['connections', 'a.csv', 'b.csv'])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert 'Datasets (2)' in out
        assert 'File connections (2)' in out
        assert 'a.csv ↔ b.csv: Common columns: Date' in out
        assert 'a.csv ↔ b.csv: Common data patterns: BTC' in out

    def test_no_connections(self, workspace, capsys):
        (workspace / 'c.csv').write_text('Other\nx\n')

        assert main(['connections', 'a.csv', 'c.csv']) == 0
        assert 'No connections found' in capsys.readouterr().out

    def test_json_stdout(self, workspace, capsys):
        assert main(['connections', 'a.csv', 'b.csv', '--format', 'json']) == 0

        payload = json.loads(capsys.readouterr().out)
        assert [record['kind'] for record in payload] == ['CommonColumns', 'CommonValues']
        assert payload[0]['datasetAId'] == 'a.csv'

    def test_json_file(self, workspace, capsys):
        """Relative --output paths land under output.directory"""
        assert main(['connections', 'a.csv', 'b.csv', '--format', 'json', '-o', 'out/c.json']) == 0

        saved = workspace / 'minam_results' / 'out' / 'c.json'
        assert json.loads(saved.read_text())[0]['detail'] == ['Date']
        assert 'Connections saved to' in capsys.readouterr().out

    def test_csv_stdout(self, workspace, capsys):
        assert main(['connections', 'a.csv', 'b.csv', '--format', 'csv']) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == 'dataset_a,dataset_b,dataset_a_id,dataset_b_id,kind,detail'
        assert lines[1] == 'a.csv,b.csv,a.csv,b.csv,CommonColumns,Date'

    def test_csv_file(self, workspace):
        assert main(['connections', 'a.csv', 'b.csv', '--format', 'csv', '--output', 'out/c.csv']) == 0

        assert (workspace / 'minam_results' / 'out' / 'c.csv').read_text().startswith('dataset_a,')

    def test_absolute_output_path(self, workspace):
        """Absolute --output paths are used as given"""
        target = workspace / 'elsewhere' / 'c.csv'

        assert main(['connections', 'a.csv', 'b.csv', '--format', 'csv', '-o', str(target)]) == 0
        assert target.exists()
        assert not (workspace / 'minam_results').exists()

    @pytest.mark.parametrize('output_format, filename', [
        ('json', 'connections.json'),
        ('csv', 'connections.csv'),
    ])
    def test_save_uses_default_filename(self, workspace, output_format, filename):
        assert main(['connections', 'a.csv', 'b.csv', '--format', output_format, '--save']) == 0

        assert (workspace / 'minam_results' / filename).exists()

    def test_output_directory_from_config(self, workspace):
        (workspace / 'minam_config.yaml').write_text('output:\n  directory: reports\n  format: json\n')

        assert main(['connections', 'a.csv', 'b.csv', '--save']) == 0

        assert json.loads((workspace / 'reports' / 'connections.json').read_text())[0]['kind'] == 'CommonColumns'

    def test_save_ignored_for_text(self, workspace, capsys):
        assert main(['connections', 'a.csv', 'b.csv', '--save']) == 0

        assert 'File connections (2)' in capsys.readouterr().out
        assert not (workspace / 'minam_results').exists()

    @pytest.mark.parametrize('output_format', ['json', 'csv'])
    def test_output_path_is_a_directory(self, workspace, output_format, capsys):
        """Write failures exit with 1 instead of a traceback"""
        (workspace / 'taken').mkdir()

        exit_code = main(['connections', 'a.csv', 'b.csv', '--format', output_format,
                          '--output', str(workspace / 'taken')])

        assert exit_code == 1
        assert 'Failed to write file' in capsys.readouterr().err

    def test_format_from_config(self, workspace, capsys):
        (workspace / 'minam_config.yaml').write_text('output:\n  format: json\n')

        assert main(['connections', 'a.csv', 'b.csv']) == 0
        assert json.loads(capsys.readouterr().out)[0]['kind'] == 'CommonColumns'

    def test_check_params_from_config(self, workspace, capsys):
        (workspace / 'cfg.yaml').write_text('connections:\n  similar_shape:\n    tolerance: 0.5\n')

        assert main(['connections', 'a.csv', 'b.csv', '--config', 'cfg.yaml']) == 0
        assert 'Similar data structure' in capsys.readouterr().out

    def test_missing_file(self, workspace, capsys):
        assert main(['connections', 'a.csv', 'missing.csv']) == 1
        assert '❌' in capsys.readouterr().err

    def test_unsupported_file(self, workspace, capsys):
        (workspace / 'report.pdf').write_bytes(b'%PDF-1.4')

        assert main(['connections', 'a.csv', 'report.pdf']) == 1
        assert 'Unsupported file type' in capsys.readouterr().err

    def test_missing_explicit_config(self, workspace, capsys):
        assert main(['connections', 'a.csv', '--config', 'nope.yaml']) == 1
        assert 'Config not found' in capsys.readouterr().err

    def test_invalid_config(self, workspace, capsys):
        (workspace / 'minam_config.yaml').write_text('output:\n  format: xml\n')

        assert main(['connections', 'a.csv']) == 1
        assert 'Configuration validation failed' in capsys.readouterr().err


class TestAskCommand:
    """minam ask"""

    def test_answer_printed(self, workspace, stub_client, capsys):
        assert main(['ask', 'Where are the prices?', 'a.csv', 'b.csv']) == 0

        out = capsys.readouterr().out
        assert 'a.csv holds the prices.' in out
        assert 'Referenced files: a.csv' in out
        assert 'Common columns: Date' in stub_client.calls[0]['messages'][0]['content']

    def test_selected_file_by_name(self, workspace, stub_client):
        assert main(['ask', 'Summarize', 'a.csv', 'b.csv', '--selected-file', 'b.csv']) == 0

        system = stub_client.calls[0]['messages'][0]['content']
        assert system.index('**b.csv**') < system.index('**a.csv**')

    def test_selected_file_by_identifier(self, workspace, stub_client):
        """Parsed files use their path as identifier"""
        (workspace / 'data').mkdir()
        (workspace / 'data' / 'c.csv').write_text('Symbol\nETH\n')

        assert main(['ask', 'Summarize', 'a.csv', 'data/c.csv', '--selected-file', 'data/c.csv']) == 0

        system = stub_client.calls[0]['messages'][0]['content']
        assert system.index('**c.csv**') < system.index('**a.csv**')

    def test_history_file(self, workspace, stub_client):
        (workspace / 'history.json').write_text(json.dumps([
            {'role': 'user', 'content': 'How many files?'},
            {'role': 'assistant', 'content': 'Two.'},
        ]))

        assert main(['ask', 'And rows?', 'a.csv', '--history-file', 'history.json']) == 0
        assert 'assistant: Two.' in stub_client.calls[0]['messages'][0]['content']

    def test_history_must_be_list(self, workspace, stub_client, capsys):
        (workspace / 'history.json').write_text('{"role": "user"}')

        assert main(['ask', 'Hi', 'a.csv', '--history-file', 'history.json']) == 1
        assert 'JSON list' in capsys.readouterr().err

    def test_missing_api_key(self, workspace, capsys):
        assert main(['ask', 'Hi', 'a.csv']) == 1
        assert 'API key' in capsys.readouterr().err

    def test_empty_query(self, workspace, stub_client, capsys):
        assert main(['ask', '  ', 'a.csv']) == 1
        assert 'Query is required' in capsys.readouterr().err


class TestInitCommand:
    """minam init"""

    def test_creates_loadable_config(self, workspace, monkeypatch, capsys):
        monkeypatch.delenv('OPENAI_API_KEY', raising=False)

        assert main(['init']) == 0

        assert 'Config created' in capsys.readouterr().out
        config = MinamConfig.from_yaml(workspace / 'minam_config.yaml')
        assert config.project == 'my_project'
        assert config.api_key is None
        assert config.check_params['common_values'] == {'max_rows': 4, 'max_values': 5}

    def test_refuses_to_overwrite(self, workspace, capsys):
        (workspace / 'minam_config.yaml').write_text('project: keep\n')

        assert main(['init']) == 1
        assert '--force' in capsys.readouterr().out
        assert (workspace / 'minam_config.yaml').read_text() == 'project: keep\n'

    def test_force(self, workspace):
        (workspace / 'minam_config.yaml').write_text('project: old\n')

        assert main(['init', '--force']) == 0
        assert 'my_project' in (workspace / 'minam_config.yaml').read_text()

    def test_custom_path(self, workspace):
        assert main(['init', '-p', 'conf/minam.yaml']) == 0
        assert (workspace / 'conf' / 'minam.yaml').exists()
