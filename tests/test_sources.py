"""
Unit tests for the directory transport and build configuration.
"""
import json
import os

import pytest

from sheetcore.config import CONFIG_FILE, BuildConfig, load_config
from sheetcore.errors import ConfigError
from sheetcore.sources import SourceFile, collect_modules


def write(root, relative, text):
    path = os.path.join(root, *relative.split('/'))
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'w') as f:
        f.write(text)
    return path


class TestCollectModules:
    """Tests for collect_modules()."""

    def test_specifiers_and_index_aliases(self, tmp_path):
        root = str(tmp_path)
        write(root, 'index.css', '.a { b: c; }')
        write(root, 'pkg/index.css', '')
        write(root, 'pkg/util.styl', '')
        write(root, 'pkg/deps/other/index.css', '')
        write(root, 'notes.txt', 'ignored')

        modules = collect_modules(root)

        assert set(modules) == {
            'index',
            'pkg', 'pkg/index', 'pkg/util',
            'pkg/deps/other', 'pkg/deps/other/index',
        }
        assert modules['pkg'] == 'pkg/index'
        assert modules['pkg/deps/other'] == 'pkg/deps/other/index'

    def test_producer_reads_file_and_names_source(self, tmp_path):
        root = str(tmp_path)
        write(root, 'pkg/a.css', '.a { b: c; }')
        producer = collect_modules(root)['pkg/a']
        assert isinstance(producer, SourceFile)
        assert producer.source == 'pkg/a.css'
        assert producer() == '.a { b: c; }'

    def test_file_wins_over_directory_alias(self, tmp_path):
        root = str(tmp_path)
        write(root, 'theme.css', '')
        write(root, 'theme/index.css', '')
        modules = collect_modules(root)
        assert isinstance(modules['theme'], SourceFile)

    def test_custom_extensions(self, tmp_path):
        root = str(tmp_path)
        write(root, 'a.css', '')
        write(root, 'b.scss', '')
        assert set(collect_modules(root, ('.scss',))) == {'b'}

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            collect_modules(str(tmp_path / 'nope'))


class TestConfig:
    """Tests for sheetmods.json loading."""

    def test_defaults_without_file(self, tmp_path):
        assert load_config(str(tmp_path)) == BuildConfig()
        assert BuildConfig().entry == 'index'

    def test_values_from_file(self, tmp_path):
        (tmp_path / CONFIG_FILE).write_text(json.dumps({'entry': 'app', 'extensions': ['.css'], 'output': 'out.css'}))
        config = load_config(str(tmp_path))
        assert (config.entry, config.extensions, config.output) == ('app', ['.css'], 'out.css')

    def test_invalid_json(self, tmp_path):
        (tmp_path / CONFIG_FILE).write_text('{ not json')
        with pytest.raises(ConfigError):
            load_config(str(tmp_path))

    def test_invalid_values(self, tmp_path):
        (tmp_path / CONFIG_FILE).write_text(json.dumps({'extensions': 'css'}))
        with pytest.raises(ConfigError):
            load_config(str(tmp_path))
