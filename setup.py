#!/usr/bin/env python
import os
import re
from io import open

from setuptools import (
    Command,
    setup,
)

readme = open('README.rst', encoding='utf8').readlines()

assert 'Web assets for the head of your django pages' in readme[4]

readme = ''.join(['assetry\n', '=======\n'] + readme[5:])


def read_reqs(name):
    with open(os.path.join(os.path.dirname(__file__), name), encoding='utf8') as f:
        return [line for line in f.read().split('\n') if line and not line.strip().startswith('#')]


def read_version():
    with open(os.path.join('assetry', '__init__.py'), encoding='utf8') as f:
        m = re.search(r'''__version__\s*=\s*['"]([^'"]*)['"]''', f.read())
        if m:
            return m.group(1)
        raise ValueError("couldn't find version")


class Tag(Command):
    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        from subprocess import call

        version = read_version()
        errno = call(['git', 'tag', '--annotate', version, '--message', 'Version %s' % version])
        if errno == 0:
            print("Added tag for version %s" % version)
        raise SystemExit(errno)


setup(
    name='assetry',
    version=read_version(),
    description='Per request management of page title, meta tags, CSS and RequireJS assets for django',
    long_description=readme,
    packages=['assetry', 'assetry.templatetags'],
    include_package_data=True,
    install_requires=['Django >= 3.2'] + read_reqs('requirements.txt'),
    extras_require={'test': read_reqs('test_requirements.txt')},
    python_requires='>=3.8',
    license="BSD",
    zip_safe=False,
    keywords='assetry django assets css requirejs',
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Framework :: Django',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
    ],
    cmdclass={'tag': Tag},
)
