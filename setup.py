from pathlib import Path
from setuptools import setup, find_packages

projdir = Path(__file__).parent
readme = (projdir / 'README.md').read_text()

setup(
    name='uriview',
    version='0.1.0',
    packages=find_packages(exclude=['tests']),
    python_requires='>=3.7',
    description='A small uri parser giving views into the parsed text',
    license='MIT',
    install_requires=['termcolor'],
    extras_require={
        'dev': ['pytest', 'mypy'],
    },
    entry_points={
        'console_scripts': ['uriview=uriview.cli:main']
    },
    long_description=readme,
    long_description_content_type='text/markdown',
)
