from setuptools import setup, find_namespace_packages

setup(
    name="smart_shelves",
    version="0.1.0",
    packages=find_namespace_packages(include=['api*', 'cli*', 'shelves*']),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "Click",
        "SQLAlchemy>=2.0",
        "fastapi",
        "pydantic>=2",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "smart-shelves=cli.main:main",
        ],
    },
)
