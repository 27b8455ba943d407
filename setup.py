#!/usr/bin/env python

from setuptools import setup, find_packages

# Determine package version
try:
    import goensemble
    VERSION = goensemble.__version__
except ImportError:
    VERSION = '0.1.0'

# Package metadata
DISTNAME = "goensemble"
DESCRIPTION = "Ensemble meta-learning: SAMME boosting and random forests"
LONG_DESCRIPTION = open('README.md', 'r', encoding='utf8').read()
MAINTAINER = "Laurent Kouadio"
MAINTAINER_EMAIL = 'etanoyau@gmail.com'
URL = "https://github.com/earthai-tech/goensemble"
LICENSE = "BSD-3-Clause"
KEYWORDS = "machine learning, ensemble, boosting, bagging, random forest"

# Package data specification
PACKAGE_DATA = {
    'goensemble': [
        '_goenslog.yml',
    ],
}

setup_kwargs = {
    'packages': find_packages(include=["goensemble", "goensemble.*"]),
    'install_requires': [
        "numpy>=1.21",
        "pandas>=1.3",
        "scikit-learn>=1.2",
        "joblib>=1.3.0",
        "tqdm>=4.64.1",
        "pyyaml>=5.0.0",
        "packaging",
    ],
    'extras_require': {
        "test": [
            "pytest",
        ]
    },
    'python_requires': '>=3.9'
}

setup(
    name=DISTNAME,
    version=VERSION,
    author=MAINTAINER,
    author_email=MAINTAINER_EMAIL,
    maintainer=MAINTAINER,
    maintainer_email=MAINTAINER_EMAIL,
    description=DESCRIPTION,
    long_description=LONG_DESCRIPTION,
    long_description_content_type="text/markdown",
    url=URL,
    license=LICENSE,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Developers",
        "Topic :: Software Development",
        "Topic :: Scientific/Engineering",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: Implementation :: CPython",
        "Operating System :: OS Independent",
    ],
    keywords=KEYWORDS,
    zip_safe=True,
    package_data=PACKAGE_DATA,
    **setup_kwargs
)
