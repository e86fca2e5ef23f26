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

import click
from .resource import generate
from ._init import ResourceNotFound


@click.group()
def main():
    """
    Manages plugin assets.
    """
    pass


@main.command('url')
@click.argument('filenames', nargs=-1, required=True)
@click.pass_context
def url(clickctx, filenames):
    """
    Provides the urls of asset files.
    """
    pluginassets = clickctx.obj['conf'].load('pluginassets')
    for filename in filenames:
        resource = generate(pluginassets, filename, filename)
        if resource is None:
            print('%s ???' % filename)
        else:
            print('%s %s' % (filename, resource.url))


@main.command('list')
@click.pass_context
def list_(clickctx):
    """
    Lists all generated resources.
    """
    pluginassets = clickctx.obj['conf'].load('pluginassets')
    for identifier, resource in pluginassets.resources.items():
        print('%s %s %s' % (identifier, resource.kind, resource.url))


@main.command('render')
@click.argument('identifiers', nargs=-1)
@click.pass_context
def render(clickctx, identifiers):
    """
    Registers and enqueues resources and prints the resulting markup.
    """
    pluginassets = clickctx.obj['conf'].load('pluginassets')
    try:
        pluginassets.register(*identifiers)
        pluginassets.enqueue(*identifiers)
    except ResourceNotFound as e:
        raise click.UsageError('Unknown resource: %s' % e.identifier)
    print(pluginassets.render())


if __name__ == '__main__':
    main()
