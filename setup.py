from setuptools import setup, find_packages

setup(
    name='harvestpy',
    version='0.1.0',
    description='A small client for the Harvest v2 time-tracking API, with a CLI that lists time entries in a clean table.',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'requests',
        'tabulate',
        'python-dotenv',
    ],
    entry_points={
        'console_scripts': [
            'harvestpy=harvestpy.__main__:main',
        ],
    },
    python_requires='>=3.8',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
