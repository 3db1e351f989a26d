from setuptools import setup, find_packages

setup(
    name="opinionminer",
    version="0.1.0",
    description="Lexicon-based sentiment and emotion scoring for English text",
    packages=find_packages(),
    package_data={"opinionminer": ["fdata/*.json"]},
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'rich>=10.0.0',
        'pyyaml>=6.0.0',
        'chardet>=5.0.0',
        'nltk>=3.8',
    ],
    extras_require={
        'dev': [
            'black>=23.0.0',
            'isort>=5.12.0',
            'flake8>=6.0.0',
            'pytest>=7.0.0',
            'pytest-timeout>=2.1.0',
            'pytest-cov>=4.1.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'opinionminer=opinionminer.cli.main:main',
        ],
    },
)
