import pytest

import score.pluginassets
from score.pluginassets import AssetPipeline


class RecordingPipeline(AssetPipeline):
    """Pipeline remembering every call made to it."""

    def __init__(self, admin=False):
        self.admin = admin
        self.calls = []

    def register_script(self, identifier, url, dependencies, version):
        self.calls.append(('register_script', identifier, url,
                           dependencies, version))

    def register_style(self, identifier, url, dependencies, version):
        self.calls.append(('register_style', identifier, url,
                           dependencies, version))

    def enqueue_script(self, identifier):
        self.calls.append(('enqueue_script', identifier))

    def enqueue_style(self, identifier):
        self.calls.append(('enqueue_style', identifier))

    def localize_script(self, identifier, key, data):
        self.calls.append(('localize_script', identifier, key, data))

    def is_admin(self):
        return self.admin

    def render(self):
        return ''


@pytest.fixture
def basepath(tmp_path):
    (tmp_path / 'js').mkdir()
    (tmp_path / 'css').mkdir()
    return tmp_path


@pytest.fixture
def pipeline():
    return RecordingPipeline()


@pytest.fixture
def make_conf(basepath, pipeline):
    def make_conf(**confdict):
        confdict.setdefault('basepath', str(basepath))
        confdict.setdefault('baseurl', 'http://example.com/plugin/')
        return score.pluginassets.init(confdict, pipeline=pipeline)
    return make_conf


@pytest.fixture
def conf(make_conf):
    return make_conf(version='1.0')
