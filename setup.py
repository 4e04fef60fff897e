import setuptools

with open('README.md', 'r') as file:
    long_description = file.read()

setuptools.setup(
    name='geosvg',
    version='0.1.0b1',
    description='Convert between SVG shapes and path data and shapely geometries',
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='',
    keywords='svg path geometry shapely bezier gis',
    package_dir={'': 'src'},
    packages=setuptools.find_packages('src'),
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        'Topic :: Scientific/Engineering :: GIS',
        'Topic :: Multimedia :: Graphics :: Graphics Conversion'
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy >= 1.20',
        'shapely >= 2.0',
        'typing_extensions >= 3.7'
    ],
    extras_require = {
        'dev': [
            'pytest >= 6.2',
            'nox',
            'flake8',
            'black'
        ]
    }
)
