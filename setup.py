import setuptools

setuptools.setup(
    name='regparm',
    version='0.1',
    license='MIT',
    zip_safe=False,
    packages=setuptools.find_packages(include=['regparm', 'regparm.*']),
    python_requires='>=3.8',
    install_requires=[
        'pyyaml', 'rich', 'rapidfuzz'
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['regparm = regparm.main:run'],
    },
    description='Control parameter loading for a register description compiler: typed parameters, legacy aliases and model annotation commands.',
)
