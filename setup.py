from setuptools import setup

# install with: pip install -e .

setup(
    name='wordlehelper',
    version='0.1.0',
    packages=['wordlehelper'],
    install_requires=[
        'click',
        'rich',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'wordle-helper = wordlehelper.helperui:cli',
        ],
    },
)
