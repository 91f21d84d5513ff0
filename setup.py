from setuptools import find_packages, setup


def read_file(file):
    with open(file, 'rb') as fh:
        data = fh.read()
    return data.decode('utf-8')

setup(name='dbfstream',
      version='1.0.0',
      description='Pure Python streaming reader for dBASE (.dbf) tables and census shapefile bundles',
      long_description=read_file('README.md'),
      long_description_content_type='text/markdown',
      package_dir={'': 'src'},
      packages=find_packages('src'),
      license='MIT',
      zip_safe=False,
      keywords='dbf dbase xbase census tiger shapefile',
      python_requires='>= 3.9',
      extras_require={'test': ['pytest']},
      entry_points={'console_scripts': ['dbfstream = dbfstream.__main__:main']},
      classifiers=['Programming Language :: Python',
                   'Programming Language :: Python :: 3',
                   'Topic :: Database',
                   'Topic :: Scientific/Engineering :: GIS',
                   'Topic :: Software Development :: Libraries',
                   'Topic :: Software Development :: Libraries :: Python Modules'])
