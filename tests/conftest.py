# Shared pytest fixtures for Twig VCS tests

import pytest
import os
import sys
import shutil
import tempfile

# Add twig-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'twig-project'))

from utils.repository import Repository


@pytest.fixture
def temp_dir():
    # Creates a temporary directory that is cleaned up after the test
    # Also saves/restores cwd to prevent issues when tests change directories
    original_dir = os.getcwd()
    tmp = os.path.realpath(tempfile.mkdtemp())
    yield tmp
    os.chdir(original_dir)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_repo(temp_dir):
    # Creates an initialized Twig repository in a temporary directory and moves into it
    original_dir = os.getcwd()
    os.chdir(temp_dir)
    Repository.initialize(temp_dir)

    yield temp_dir

    os.chdir(original_dir)


@pytest.fixture
def repo(temp_repo):
    # A freshly loaded repository context for the temporary repository
    return Repository.open(temp_repo)


def write_file(repo_root, path, content):
    full_path = os.path.join(repo_root, *path.split('/'))
    os.makedirs(os.path.dirname(full_path), exist_ok=True)
    if isinstance(content, str):
        content = content.encode()
    with open(full_path, 'wb') as f:
        f.write(content)


def read_file(repo_root, path):
    with open(os.path.join(repo_root, *path.split('/')), 'rb') as f:
        return f.read()


def file_exists(repo_root, path):
    return os.path.isfile(os.path.join(repo_root, *path.split('/')))


# Mock args object for command functions
class MockArgs:
    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            setattr(self, key, value)
