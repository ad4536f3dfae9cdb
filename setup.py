from setuptools import setup, find_packages

# -------------------------------------------------
# Setup
# -------------------------------------------------

setup(
    name="constrained-alignment",
    version="1.0.0",
    description="Constrained global alignment of a source sequence onto a fixed-length reference",
    python_requires=">=3.8",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"constrained_alignment": ["config/*.yaml"]},
    include_package_data=True,
    install_requires=[
        "numpy",
        "pyyaml",
        "psutil",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "constrained-align=constrained_alignment.scripts.run_alignment:main",
        ],
    },
    zip_safe=False,
)
