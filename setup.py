from setuptools import setup, find_packages

setup(
    name='blockalloc',
    version='0.1',
    packages=find_packages(exclude=['tests*']),
    license='MIT',
    description='A block-partition memory allocator simulator with first-fit and best-fit placement',
    python_requires='>=3.10',
    install_requires=['filelock','numpy'],
    extras_require={'test': ['pytest']},
)
