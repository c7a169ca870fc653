from setuptools import setup, find_packages

setup(
    name='sexpc',
    version='0.1.0',
    py_modules=['compiler'],
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'lark>=1.1',
        'pydantic>=2',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
