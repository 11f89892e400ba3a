from setuptools import setup, find_packages

setup(
    name="hoops-totals",
    version="0.1.0",
    description="NBA totals analytics: match processing, strategy backtests and live edge signals",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.22.4",
        "pandas>=1.5.3",
        "pytz>=2022.7",
        "requests>=2.31.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "hoops-totals=hoops_totals.main:main",
        ],
    },
)
