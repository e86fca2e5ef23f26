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

import abc
import html
import json
import logging
import re


log = logging.getLogger(__name__)


class AssetPipeline(abc.ABC):
    """
    The asset queue of the host application. :class:`Resources
    <score.pluginassets.resource.Resource>` hand themselves to an object of
    this class when they are registered or enqueued.
    """

    @abc.abstractmethod
    def register_script(self, identifier, url, dependencies, version):
        """
        Makes a script known under given *identifier*.
        """

    @abc.abstractmethod
    def register_style(self, identifier, url, dependencies, version):
        """
        Makes a stylesheet known under given *identifier*.
        """

    @abc.abstractmethod
    def enqueue_script(self, identifier):
        """
        Marks a registered script for output.
        """

    @abc.abstractmethod
    def enqueue_style(self, identifier):
        """
        Marks a registered stylesheet for output.
        """

    @abc.abstractmethod
    def localize_script(self, identifier, key, data):
        """
        Exposes *data* under the global name *key* to the script with given
        *identifier*.
        """

    @abc.abstractmethod
    def is_admin(self):
        """
        Whether the current request is in an administrative context.
        """

    @abc.abstractmethod
    def render(self):
        """
        Returns the HTML markup loading all enqueued assets.
        """


class HtmlPipeline(AssetPipeline):
    """
    An :class:`AssetPipeline` keeping everything in memory and rendering
    plain ``<link>`` and ``<script>`` tags. The *admin* flag is the value
    returned by :meth:`is_admin`.

    Registering an identifier a second time has no effect, the first
    registration wins. Dependencies are rendered before the assets that
    need them, even if they were never enqueued themselves. Localizing a
    script twice with the same key replaces the earlier data.
    """

    keyregex = re.compile(r'[A-Za-z_$][A-Za-z0-9_$]*')

    def __init__(self, admin=False):
        self.admin = admin
        self.scripts = {}
        self.styles = {}
        self.localizations = {}
        self.queue = {'script': [], 'style': []}

    def register_script(self, identifier, url, dependencies, version):
        self.scripts.setdefault(
            identifier, (url, tuple(dependencies or ()), version))

    def register_style(self, identifier, url, dependencies, version):
        self.styles.setdefault(
            identifier, (url, tuple(dependencies or ()), version))

    def enqueue_script(self, identifier):
        if identifier not in self.queue['script']:
            self.queue['script'].append(identifier)

    def enqueue_style(self, identifier):
        if identifier not in self.queue['style']:
            self.queue['style'].append(identifier)

    def localize_script(self, identifier, key, data):
        if not HtmlPipeline.keyregex.fullmatch(key):
            log.warning('Invalid localization key "%s" for "%s"',
                        key, identifier)
            return
        self.localizations.setdefault(identifier, {})[key] = data

    def is_admin(self):
        return self.admin

    def render(self):
        parts = []
        for identifier in self._resolve(self.styles, self.queue['style']):
            url, _, version = self.styles[identifier]
            parts.append('<link rel="stylesheet" id="%s-css" href="%s">' % (
                html.escape(identifier), html.escape(_versioned(url, version))))
        for identifier in self._resolve(self.scripts, self.queue['script']):
            url, _, version = self.scripts[identifier]
            for key, data in self.localizations.get(identifier, {}).items():
                parts.append('<script>var %s = %s;</script>' % (
                    key, json.dumps(data).replace('</', '<\\/')))
            parts.append('<script id="%s-js" src="%s"></script>' % (
                html.escape(identifier), html.escape(_versioned(url, version))))
        return '\n'.join(parts)

    def _resolve(self, registry, queue):
        """
        Returns the identifiers in *queue* together with all their
        dependencies, dependencies first. Identifiers missing in the
        *registry* are dropped along with everything depending on them.
        """
        done = []
        failed = set()

        def visit(identifier, stack):
            if identifier in done:
                return True
            if identifier in failed:
                return False
            if identifier in stack:
                log.warning('Dependency cycle: %s',
                            ' -> '.join(stack + [identifier]))
                return True
            if identifier not in registry:
                log.warning('Resource "%s" was never registered', identifier)
                failed.add(identifier)
                return False
            for dependency in registry[identifier][1]:
                if not visit(dependency, stack + [identifier]):
                    log.warning('Skipping "%s": missing dependency "%s"',
                                identifier, dependency)
                    failed.add(identifier)
                    return False
            done.append(identifier)
            return True

        for identifier in queue:
            visit(identifier, [])
        return done


def _versioned(url, version):
    if not version:
        return url
    separator = '&' if '?' in url else '?'
    return '%s%sver=%s' % (url, separator, version)
