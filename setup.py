from setuptools import setup, find_packages

setup(
    name="hunk_patcher",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml",
        "textual",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "hunkpatch=hunk_patcher.cli:main",
        ],
    },
    description="Interactive hunk-by-hunk review and patching of text files.",
)
