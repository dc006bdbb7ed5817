# Unit tests for utils/config.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'twig-project'))

from utils import config, errors


def test_default_abbrev(temp_repo):
    assert config.get_abbrev(temp_repo) == 7


def test_write_and_read(temp_repo):
    config.write_config(temp_repo, 'core.abbrev', '10')
    assert config.get_abbrev(temp_repo) == 10
    assert config.read_config(temp_repo).get('core', 'abbrev') == '10'


def test_bad_abbrev_falls_back(temp_repo):
    config.write_config(temp_repo, 'core.abbrev', 'lots')
    assert config.get_abbrev(temp_repo) == 7


def test_invalid_key(temp_repo):
    with pytest.raises(errors.InvalidConfigKey):
        config.write_config(temp_repo, 'abbrev', '10')
