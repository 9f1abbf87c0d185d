from setuptools import setup, find_packages


setup(
    name='discreet',
    version='0.1.0',
    description=('Entropy and mutual information estimators for discrete '
                 'data.'),
    packages=find_packages(include=['discreet', 'discreet.*']),
    package_data={
        'discreet.citation': ['articles.json'],
    },
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'scipy',
        'scikit-learn',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'discreet = discreet.apps.main:main',
        ],
    },
)
