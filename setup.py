from setuptools import setup, find_packages

setup(
    name='note_flashcards',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    install_requires=[
        'click',
        'rich',
        'pyyaml',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'note-flashcards=note_flashcards.cli:main',
        ],
    },
    description='Extract spaced-repetition flashcards from markdown notes',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.9',
)
