import pytest
from click.testing import CliRunner

import score.pluginassets
from score.pluginassets.cli import main


class FakeConf:

    def __init__(self, modules):
        self.modules = modules

    def load(self, name):
        return self.modules[name]


@pytest.fixture
def html_conf(basepath):
    (basepath / 'js' / 'app.min.js').write_text('')
    return score.pluginassets.init({
        'basepath': str(basepath),
        'baseurl': '/static',
        'minify': 'true',
    })


def invoke(conf, *args):
    runner = CliRunner()
    return runner.invoke(
        main, args, obj={'conf': FakeConf({'pluginassets': conf})})


def test_url(html_conf):
    result = invoke(html_conf, 'url', 'js/app.js', 'css/style.css', 'a.png')
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        'js/app.js /static/js/app.min.js',
        'css/style.css /static/css/style.css',
        'a.png ???',
    ]
    assert html_conf.resources == {}


def test_list(html_conf):
    html_conf.generate('app', 'js/app.js')
    html_conf.generate('style', 'css/style.css')
    result = invoke(html_conf, 'list')
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        'app script /static/js/app.min.js',
        'style style /static/css/style.css',
    ]


def test_render(html_conf):
    html_conf.generate('app', 'js/app.js')
    html_conf.generate('style', 'css/style.css')
    result = invoke(html_conf, 'render', 'app')
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        '<script id="app-js" src="/static/js/app.min.js"></script>',
    ]


def test_render_unknown_identifier(html_conf):
    result = invoke(html_conf, 'render', 'nope')
    assert result.exit_code == 2
    assert 'Unknown resource: nope' in result.output
