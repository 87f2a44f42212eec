#! /usr/bin/env python
#
# License: 3-clause BSD

descr = """Escape time computation of the Mandelbrot set on a pixel grid"""

import os
import shutil

from setuptools import setup, find_packages, Command


#==============================================================================
DISTNAME = 'mandelgrid'
DESCRIPTION = 'Escape time grids of the Mandelbrot set as ASCII art, PNG or checksum'
with open('README.rst') as f:
    LONG_DESCRIPTION = f.read()
LICENSE = 'BSD'
VERSION = '1.0.0'
#===============================================================================


install_requires = ['numpy',
                    'pillow']

extras_require = {'test': ['pytest']}


###############################################################################

class CleanCommand(Command):
    description = "Remove build artifacts from the source tree"
    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        if os.path.exists('build'):
            shutil.rmtree('build')
        for dirpath, dirnames, filenames in os.walk('mandelgrid'):
            for filename in filenames:
                if filename.endswith('.pyc'):
                    os.unlink(os.path.join(dirpath, filename))
            for dirname in dirnames:
                if dirname == '__pycache__':
                    shutil.rmtree(os.path.join(dirpath, dirname))


###############################################################################
def setup_package():

    metadata = dict(name=DISTNAME,
                    description=DESCRIPTION,
                    license=LICENSE,
                    version=VERSION,
                    long_description=LONG_DESCRIPTION,
                    long_description_content_type='text/x-rst',
                    classifiers=['Intended Audience :: Science/Research',
                                 'Intended Audience :: Developers',
                                 'License :: OSI Approved',
                                 'Programming Language :: Python',
                                 'Topic :: Scientific/Engineering',
                                 'Operating System :: POSIX',
                                 'Operating System :: Unix',
                                 'Operating System :: MacOS',
                                 'Operating System :: Microsoft :: Windows',
                                 'Programming Language :: Python :: 3',
                                 ],
                    packages=find_packages(include=['mandelgrid', 'mandelgrid.*']),
                    python_requires='>=3.8',
                    install_requires=install_requires,
                    extras_require=extras_require,
                    entry_points={'console_scripts': [
                        'mandelgrid = mandelgrid.scripts.mandelgrid_render:main']},
                    cmdclass={'clean': CleanCommand},
                    zip_safe=False)

    setup(**metadata)


if __name__ == "__main__":
    setup_package()
