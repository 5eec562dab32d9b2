from setuptools import setup, find_packages


setup(
    name="dynsha256",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={
        "": "src",
    },
    install_requires=[
        "mpyc",
    ],
    extras_require={
        "test": ["pytest"],
    },
    # Array[field, 1024]: integer type arguments need typing from 3.11
    python_requires=">=3.11",
    include_package_data=True,
    zip_safe=False,
)
