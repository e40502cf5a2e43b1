#!/usr/bin/env python
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or
# implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

import os
from setuptools import setup, find_packages


# following function is taken from setuptools example.
# https://pypi.python.org/pypi/an_example_pypi_project (BSD)
def read(fname):
    with open(os.path.join(os.path.dirname(__file__), fname)) as f:
        return f.read()


setup(
    name="git-branch-commits",
    version="0.3.0",
    description="List commits unique to the current branch compared to its "
                "parent branch.",
    license="Apache Software License",
    keywords="git branch log parent",
    url="",
    packages=find_packages(),
    package_data={
        'git_branch_commits.tests': ['parent/scenarios/*.yaml'],
    },
    python_requires='>=3.8',
    install_requires=['GitPython', 'pbr'],
    extras_require={
        'completion': ['argcomplete'],
        'test': ['fixtures', 'mock', 'PyYAML', 'testscenarios', 'testtools'],
    },
    entry_points={
        'console_scripts': [
            'git-branch-commits = git_branch_commits.main:main',
        ],
    },
    long_description=read('README'),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Topic :: Utilities",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
    ]
)
