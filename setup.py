from setuptools import setup, find_packages

setup(
    name="othello",
    version="0.1",
    packages=find_packages(include=["src", "src.*"]),
    install_requires=[
        'numpy>=1.19.0',
        'tqdm>=4.0.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    python_requires='>=3.7',
)
