from setuptools import setup, find_packages


setup(name='rotconv',
      version='1.0.0',
      description='Conversions between axis-angle, quaternion, rotation matrix, rotation vector, and yaw-pitch-roll '
                  'rotation representations',
      packages=find_packages(include=['rotconv', 'rotconv.*']),
      python_requires='>=3.10',
      install_requires=['numpy'],
      extras_require={'test': ['pytest', 'scipy']})
