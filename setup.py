from setuptools import setup

setup(
    name='pyradix',
    version='0.1.0',
    description='Fractional decimal numbers in an arbitrary base.',
    packages=['pyradix'],
    python_requires='>=3.7',
    install_requires=['numpy'],
    extras_require={
        'plot': ['matplotlib'],
        'test': ['pytest', 'matplotlib'],
    },
    entry_points={
        'console_scripts': ['pyradix = pyradix.cli:main'],
    },
)
