from setuptools import setup, find_packages

__version__ = '0.1.0'

requirements = [
    'coloredlogs',
]

test_requirements = [
    'pytest',
]

setup(
    name='tokenledger',
    version=__version__,
    description='Multi-token balance ledger with batch transfers and receiver acceptance checks.',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=requirements,
    extras_require={
        'test': test_requirements,
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
    zip_safe=True,
    include_package_data=True,
)
