from setuptools import setup, find_packages

setup(
    name="meshtracer",
    version="1.0.0",
    description="Ray-casting mesh renderer with shadows and mirror reflections",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.21.0",
        "matplotlib>=3.5.0",
        "opencv-python>=4.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "meshtracer=meshtracer.main:main",
        ],
    },
    python_requires=">=3.8",
)
