from setuptools import setup, find_packages

setup(
    name="sharerecover",
    version="1.0",
    description="Exact secret reconstruction for threshold secret sharing",
    long_description=("Recovers the secret (constant term) of a Shamir-style threshold secret sharing from its shares "
                      "by polynomial interpolation with exact rational Gaussian elimination"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(include=["sharerecover", "sharerecover.*"]),
    install_requires=["numpy", "sympy"],
    extras_require={
        "flint": ["python-flint"],
        "test": ["pytest", "pytest-timeout"],
    },
    entry_points={
        "console_scripts": ["sharerecover=sharerecover.cli:main"],
    },
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Security :: Cryptography"
    ],
    keywords=["secret sharing", "shamir", "polynomial interpolation", "exact arithmetic"],
    zip_safe=False,
)
