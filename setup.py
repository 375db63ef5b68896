from setuptools import setup
from setuptools import find_namespace_packages

setup(
    name='ecsrun',
    version='0.1.0',
    packages=find_namespace_packages(include=['ecsrun', 'ecsrun.*']),
    install_requires=[
        'Click',
        'PyYAML',
        'boto3',
        'botocore'
    ],
    extras_require={
        'test': [
            'pytest',
            'moto>=5'
        ]
    },
    entry_points={
        'console_scripts': [
            'ecsrun = ecsrun.ecsrun:run_task',
        ],
    },
)
