# Shared pytest fixtures for Kit tests

import pytest
import os
import sys
import shutil
import tempfile

# Add kit-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'kit-project'))

from utils import repository
from utils.objects import ObjectStore


HELLO_BLOB = 'ce013625030ba8dba906f756967f9e9ca394464a'


@pytest.fixture
def temp_dir():
    # Creates a temporary directory that is cleaned up after the test
    # Also saves/restores cwd to prevent issues when tests change directories
    original_dir = os.getcwd()
    tmp = tempfile.mkdtemp()
    yield tmp
    os.chdir(original_dir)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def store(temp_dir):
    # An empty object store rooted in the temporary directory
    return ObjectStore(os.path.join(temp_dir, 'objects'))


@pytest.fixture
def temp_repo(temp_dir):
    # Creates an initialized Kit repository in a temporary directory
    original_dir = os.getcwd()
    os.chdir(temp_dir)

    repository.init_repository(temp_dir)

    # Set up config
    config_path = os.path.join(temp_dir, '.kit', 'config')
    with open(config_path, 'w') as f:
        f.write('[user]\n')
        f.write('name = Test User\n')
        f.write('email = test@example.com\n')

    yield temp_dir

    os.chdir(original_dir)


@pytest.fixture
def repo_with_file(temp_repo):
    # Creates a repo whose working tree holds test.txt with "hello\n"
    file_path = os.path.join(temp_repo, 'test.txt')
    with open(file_path, 'wb') as f:
        f.write(b'hello\n')
    return temp_repo


def write_file(root, rel_path, content, mode=None):
    path = os.path.join(root, *rel_path.split('/'))
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'wb') as f:
        f.write(content)
    if mode is not None:
        os.chmod(path, mode)
    return path


# Mock args object for command functions
class MockArgs:
    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            setattr(self, key, value)
