from setuptools import setup, find_packages

setup(
    name='exprlang',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    install_requires=['pyarrow'],  # Variable table CSV export
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'expr=expr_lang.cli:main'  # Entry point to main function
        ]
    },
    author='exprlang Team',
    description='An interpreter for arithmetic and assignment expressions over named variables',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
    ],
    python_requires='>=3.8',
)
