# setup.py
from setuptools import setup, find_packages

setup(
    name="icon_scout",
    version="0.1.0",
    description="Асинхронный поиск иконок сайтов IconScout",
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"icon_scout": ["templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "cairosvg>=2.7",
        "click>=8.1",
        "jinja2>=3.1",
        "pillow>=10.1",
        "pydantic>=2.5",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4,<9",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": ["icon_scout=icon_scout.cli:cli"],
    },
    python_requires=">=3.11",
)
