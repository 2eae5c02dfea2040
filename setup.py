from setuptools import setup, find_packages
import pathlib


here = pathlib.Path(__file__).parent.resolve()
long_description = (here / 'README.md').read_text(encoding='utf-8')

setup(
    name="inflector",
    version="0.1.0",
    description="Grammatical inflection patterns for translated strings",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Internationalization",
    ],
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=['schema', 'click', 'pandas', 'autopep8'],
    extras_require={
        'dev': ['pytest', 'pytest-cov', 'pylint', 'mypy'],
    },
    entry_points={
        'console_scripts': ['inflector=inflector.inflector:main'],
    },
)
