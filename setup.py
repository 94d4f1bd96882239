import os
import re

from setuptools import setup


def get_version():
    module_init = 'pyroshow/version.py'

    if not os.path.isfile(module_init):
        module_init = '../' + module_init
        if not os.path.isfile(module_init):
            raise ValueError('Unable to determine version!')

    with open(module_init) as version_file:
        return re.search(r'__version__\s*=\s*[\'"]([^\'"]*)[\'"]',
                         version_file.read()).group(1)


setup(name='pyroshow',
      version=get_version(),
      description='Deterministic firework show simulation',
      author='Pyroshow Developers',
      license='LGPL',
      packages=['pyroshow', 'pyroshow.fxlib', 'pyroshow.client', 'pyroshow.client.commands'],
      entry_points={
          'console_scripts': [
              'pyroshow = pyroshow.client.main:cli_entry'
          ]
      },
      python_requires='>=3.10',
      install_requires=['coloraide', 'colorlog', 'frozendict', 'numpy',
                        'ruamel.yaml', 'traitlets', 'wrapt'],
      extras_require={'test': ['pytest']},
      keywords='fireworks pyrotechnics particles simulation show',
      include_package_data=True,
      zip_safe=False,
      classifiers=[
          'Development Status :: 3 - Alpha',
          'Environment :: Console',
          'Intended Audience :: Developers',
          'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
          'Programming Language :: Python :: 3 :: Only',
          'Topic :: Multimedia :: Graphics :: 3D Rendering',
          'Topic :: Scientific/Engineering :: Physics'
      ])
