from setuptools import setup, find_packages

setup(
    name="vlc-rc-client",
    version="0.1.0",
    description="Manage a VLC media player instance and control it over its RC interface",
    author="vlc-rc-client contributors",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "black>=23.0.0",
            "pylint>=2.17.0",
        ]
    },
)
