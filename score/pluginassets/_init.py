# Copyright © 2015-2018 STRG.AT GmbH, Vienna, Austria
#
# This file is part of the The SCORE Framework.
#
# The SCORE Framework and all its parts are free software: you can redistribute
# them and/or modify them under the terms of the GNU Lesser General Public
# License version 3 as published by the Free Software Foundation which is in the
# file named COPYING.LESSER.txt.
#
# The SCORE Framework and all its parts are distributed without any WARRANTY;
# without even the implied warranty of MERCHANTABILITY or FITNESS FOR A
# PARTICULAR PURPOSE. For more details see the GNU Lesser General Public
# License.
#
# If you have not received a copy of the GNU Lesser General Public License see
# http://www.gnu.org/licenses/.
#
# The License-Agreement realised between you as Licensee and STRG.AT GmbH as
# Licenser including the issue of its valid conclusion and its pre- and
# post-contractual effects is governed by the laws of Austria. Any disputes
# concerning this License-Agreement including the issue of its valid conclusion
# and its pre- and post-contractual effects are exclusively decided by the
# competent court, in whose district STRG.AT GmbH has its registered seat, at
# the discretion of STRG.AT GmbH also the competent court, in whose district the
# Licensee has his registered seat, an establishment or assets.

from score.init import ConfiguredModule, ConfigurationError, parse_bool
import os
from .pipeline import HtmlPipeline
from .resource import generate

defaults = {
    'basepath': None,
    'baseurl': '/',
    'minify': False,
    'version': None,
    'admin': False,
}


def init(confdict, pipeline=None, tpl=None):
    """
    Initializes this module according to :ref:`our module initialization
    guidelines <module_initialization>` with the following configuration keys:

    :confkey:`basepath`
        The folder containing the plugin's asset files. Filenames of all
        :term:`resources <resource>` are relative to this folder.

    :confkey:`baseurl` :confdefault:`/`
        The url under which the contents of *basepath* are served.

    :confkey:`minify` :confdefault:`False`
        Whether minified versions of the files should be used. A file called
        ``app.js`` will be served as ``app.min.js``, if the latter exists in
        the *basepath*.

    :confkey:`version` :confdefault:`None`
        A version string to pass to the host when registering resources.

    :confkey:`admin` :confdefault:`False`
        The administrative flag of the default :class:`HtmlPipeline
        <score.pluginassets.pipeline.HtmlPipeline>`. Ignored, if a *pipeline*
        was passed explicitly.

    All other keys are retained and can be accessed via
    :meth:`ConfiguredPluginassetsModule.get_option`.

    Both further parameters are optional dependencies, which :mod:`score.init`
    resolves by module name:

    *pipeline*
        The configured module called ``pipeline``, standing in for the host
        application's asset queue. It must implement :class:`AssetPipeline
        <score.pluginassets.pipeline.AssetPipeline>`. An :class:`HtmlPipeline
        <score.pluginassets.pipeline.HtmlPipeline>` is created if it is
        missing.

    *tpl*
        A configured :mod:`score.tpl` module. If present, the html global
        ``pluginassets_tags`` is registered, rendering all enqueued assets.
    """
    conf = dict(defaults.items())
    conf.update(confdict)
    if not conf['basepath']:
        raise ConfigurationError(
            'score.pluginassets', 'No basepath configured')
    if not os.path.isdir(conf['basepath']):
        raise ConfigurationError(
            'score.pluginassets', 'Configured basepath does not exist')
    if pipeline is None:
        pipeline = HtmlPipeline(parse_bool(conf['admin']))
    return ConfiguredPluginassetsModule(
        pipeline, tpl, conf['basepath'], conf['baseurl'],
        parse_bool(conf['minify']), conf)


class ConfiguredPluginassetsModule(ConfiguredModule):
    """
    This module's :class:`configuration class
    <score.init.ConfiguredModule>`. It also keeps track of all resources
    created through :meth:`generate`.
    """

    def __init__(self, pipeline, tpl, basepath, baseurl, minify, options):
        super().__init__(__package__)
        self.pipeline = pipeline
        self.tpl = tpl
        self.basepath = basepath
        self.baseurl = baseurl
        self.minify = minify
        self.options = options
        self.resources = {}
        if tpl:
            self._register_tpl_globals()

    def _register_tpl_globals(self):
        self.tpl.filetypes['text/html'].add_global(
            'pluginassets_tags', self.render, escape=False)

    def get_option(self, name):
        """
        Returns the configured value for *name*, or `None`.
        """
        return self.options.get(name)

    def generate(self, identifier, filename, dependencies=None, admin=False,
                 localize_key=None, localize_data=None):
        """
        Creates a :term:`resource` via :func:`score.pluginassets.generate`
        and remembers it under its *identifier*. Returns `None` if the type
        of the file could not be determined.
        """
        resource = generate(self, identifier, filename, dependencies, admin,
                            localize_key, localize_data)
        if resource is not None:
            self.resources[identifier] = resource
        return resource

    def get_resource(self, identifier):
        try:
            return self.resources[identifier]
        except KeyError:
            raise ResourceNotFound(identifier)

    def register(self, *identifiers):
        """
        Registers the resources with given *identifiers* with the pipeline.
        Registers all known resources if no identifier was given.
        """
        for resource in self._iter_resources(identifiers):
            resource.register()

    def enqueue(self, *identifiers):
        """
        Same as :meth:`register`, but enqueues the resources.
        """
        for resource in self._iter_resources(identifiers):
            resource.enqueue()

    def render(self):
        """
        Returns the HTML markup of the pipeline.
        """
        return self.pipeline.render()

    def _iter_resources(self, identifiers):
        if not identifiers:
            return list(self.resources.values())
        return [self.get_resource(identifier) for identifier in identifiers]


class ResourceNotFound(Exception):
    """
    Thrown when a resource was requested by an identifier, that was never
    passed to :meth:`ConfiguredPluginassetsModule.generate`.
    """

    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__(identifier)
