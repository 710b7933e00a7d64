from setuptools import setup, find_packages

__version__ = '0.1.0'

requirements = [
    'astor>=0.8.1',
    'autopep8>=1.5.7',
    'stdlib-list>=0.10.0',
    'coloredlogs>=15.0',
]

test_requirements = [
    'pytest',
]

setup(
    name='fundme',
    version=__version__,
    description='Crowdfunding ledger contract and the Python smart contract engine it runs on.',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=requirements,
    extras_require={
        'test': test_requirements,
    },
    python_requires='>=3.9',
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
    zip_safe=False,
    include_package_data=True,
    package_data={
        'fundme': ['contracts/*.s.py'],
    },
)
