import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pymensura",
    version="0.1.0",
    description="Dimensional analysis, units of measure and measurement "
                "scales.",
    include_package_data=True,
    install_requires=[
        'numpy'
    ],
    extras_require={
        'test': ['pytest']
    },
    keywords='units dimensions measurement scales conversion',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['pymensura', 'pymensura.*']),
    python_requires='>=3.10',
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering"
    ]
)
