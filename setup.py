# setup.py

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name='warmbench',
    version='0.1.0',
    author='Justin Arndt',
    author_email='justinarndtai@gmail.com',
    description='A micro-benchmarking harness with warmup and untimed setup/verification phases',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=['warmbench', 'warmbench.*']),
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
    entry_points={
        'console_scripts': ['warmbench-sort=warmbench.tools.sort_cli:main'],
    },
    zip_safe=False,
    python_requires='>=3.8',
)
