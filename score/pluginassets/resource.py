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

"""
Provides the two kinds of :term:`resources <resource>` a plugin can hand to
its host: :class:`Script` and :class:`Style`. Instances are usually created
via :func:`generate`, which picks the correct class by looking at the file
extension.
"""

import abc
import logging
import os


def join_url(base, path):
    """
    Joins a *base* url and a relative *path* with exactly one slash.
    """
    if not base:
        return path
    return '%s/%s' % (base.rstrip('/'), path.lstrip('/'))


def generate(conf, identifier, filename, dependencies=None, admin=False,
             localize_key=None, localize_data=None):
    """
    Creates a :class:`Script` for files ending in ``.js`` and a :class:`Style`
    for files ending in ``.css``. The localization parameters are only used
    for scripts.

    If the type of the file cannot be determined, a warning is logged and
    `None` is returned.
    """
    if filename.endswith('.js'):
        return Script(conf, identifier, filename, dependencies, admin,
                      localize_key, localize_data)
    if filename.endswith('.css'):
        return Style(conf, identifier, filename, dependencies, admin)
    conf.log.log(
        logging.WARNING,
        'Unable to determine resource type for "%s"', filename)
    return None


class Resource(abc.ABC):
    """
    Base class for assets that are registered with the :class:`host pipeline
    <score.pluginassets.pipeline.AssetPipeline>` of a configured module
    *conf*.

    The *filename* is relative to the configured ``basepath``, the
    *dependencies* are identifiers of other resources that must be output
    before this one. Resources flagged as *admin* will only be registered in
    an administrative context.
    """

    kind = None
    extension = None

    def __init__(self, conf, identifier, filename, dependencies=None,
                 admin=False):
        self.conf = conf
        self.identifier = identifier
        self.filename = filename
        self.dependencies = tuple(dependencies or ())
        self.admin = admin
        self._url = self._resolve_url(self.extension)

    @property
    def url(self):
        """
        The url of this resource, pointing to the minified file, if one was
        found.
        """
        return self._url

    @abc.abstractmethod
    def register(self):
        """
        Registers this resource with the host pipeline.
        """

    @abc.abstractmethod
    def enqueue(self):
        """
        Marks this resource for output.
        """

    def _may_register(self):
        return not self.admin or self.conf.pipeline.is_admin()

    def _resolve_url(self, ext):
        filename = self.filename
        min_ext = '.min' + ext
        if self.conf.minify and not self.filename.endswith(min_ext):
            # only the first occurrence is replaced, wherever it is
            filename = self.filename.replace(ext, min_ext, 1)
        if filename != self.filename:
            path = os.path.join(self.conf.basepath, filename)
            if not os.path.exists(path):
                self.conf.log.log(
                    logging.INFO,
                    'Minified version "%s" not found, falling back to "%s"',
                    filename, self.filename)
                filename = self.filename
        return join_url(self.conf.baseurl, filename)

    def __repr__(self):
        return '<%s %s %s>' % (type(self).__name__, self.identifier, self._url)


class Script(Resource):
    """
    A javascript :class:`Resource`. Scripts may carry localization data,
    which will be exposed to the script under the name *localize_key*.
    """

    kind = 'script'
    extension = '.js'

    def __init__(self, conf, identifier, filename, dependencies=None,
                 admin=False, localize_key=None, localize_data=None):
        self.localize_key = localize_key
        self.localize_data = localize_data
        super().__init__(conf, identifier, filename, dependencies, admin)

    def register(self):
        if not self._may_register():
            return
        self.conf.pipeline.register_script(
            self.identifier, self.url, list(self.dependencies),
            self.conf.get_option('version'))
        self.set_localize_data(self.localize_key, self.localize_data)

    def set_localize_data(self, key, data):
        """
        Stores the localization *data* and passes it to the host, if a *key*
        was given. Does nothing otherwise.
        """
        if key is None:
            return
        self.localize_key = key
        self.localize_data = data
        self.conf.pipeline.localize_script(self.identifier, key, data)

    def enqueue(self):
        self.conf.pipeline.enqueue_script(self.identifier)


class Style(Resource):
    """
    A stylesheet :class:`Resource`.
    """

    kind = 'style'
    extension = '.css'

    def register(self):
        if not self._may_register():
            return
        self.conf.pipeline.register_style(
            self.identifier, self.url, list(self.dependencies),
            self.conf.get_option('version'))

    def enqueue(self):
        self.conf.pipeline.enqueue_style(self.identifier)
