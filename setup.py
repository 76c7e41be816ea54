from importlib import import_module
from setuptools import setup

with open('README.rst') as f:
    readme = f.read()

setup(
    name='oxforth',
    version=import_module('oxforth').__version__,
    author='Seth Junot',
    description='Line-oriented interpreter for a small Forth-like language',
    long_description=readme,
    long_description_content_type='text/x-rst',
    url='https://github.com/xSetech/OxForth',
    project_urls={
        'Source Code': 'https://github.com/xSetech/OxForth',
        'Issue Tracker': 'https://github.com/xSetech/OxForth/issues',
    },
    packages=['oxforth'],
    include_package_data=True,
    install_requires=[],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Operating System :: OS Independent',
        'Programming Language :: Forth',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development',
        'Topic :: Software Development :: Interpreters',
    ],
    python_requires='>=3.6',
    entry_points={
        'console_scripts': [
            'oxforth = oxforth.__main__:cli_main',
        ],
    },
)
