from setuptools import find_packages, setup

# Générateur du rapport de vérification des cassettes de premier secours.
# Utiliser :
#   pip install -e .[test]
#   rapporto-cassette <operatore> <kits> <sede> <revisione> [<firma>] [<logo>]

setup(
    name='RapportoCassette',
    version='1.0',
    description="Rapporto PDF di verifica delle cassette di primo soccorso",
    author='Rapporto Cassette maintainers',
    author_email='contact@example.com',
    url='https://example.com/RapportoCassette',
    packages=find_packages(include=['rapporto_cassette', 'rapporto_cassette.*']),
    python_requires='>=3.10',
    install_requires=[
        'reportlab>=4.0',
        'pydantic>=2.0',
        'Pillow>=10.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': ['rapporto-cassette=rapporto_cassette.__main__:main'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
)
