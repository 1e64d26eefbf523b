# setup.py - 安装配置

from setuptools import setup, find_packages

setup(
    name="doodle-dash",
    version="0.1.0",
    description="Timed doodle challenge with an AI art critic, built with Pygame.",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "pygame>=2.1.3",
        "openai>=1.0.0",
        "pydantic>=2.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ],
        "dev": [
            "black>=23.9.1",
            "flake8>=6.1.0",
            "isort>=5.12.0",
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "pre-commit>=3.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "doodle-dash=doodle_dash.client.main:main",
        ],
    },
)
