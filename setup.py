from setuptools import setup, find_packages

setup(
    name="charsetutil",  # Package name
    version="0.1.0",  # Version number
    description="Character set helpers: UTF-8 validation and cleanup, escaped code points, accent removal.",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["charsetutil", "charsetutil.*"]),
    install_requires=[
        "python-dotenv",
        "pydantic>=2",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
)
