from setuptools import setup, find_packages
from handins import __version__

requirements = []
with open('requirements.txt', 'r') as in_:
  requirements = in_.readlines()

setup(
  name='handins',
  version=__version__,
  description='Grade projection and assignment submission for the handins course server.',
  license='BSD',
  packages=find_packages(exclude=['tests', 'tests.*']),
  zip_safe=False,
  install_requires=requirements,
  extras_require={'test': ['pytest']},
  scripts=['bin/handins']
)
