from glob import glob
from setuptools import setup


setup(
    name='rpn4',
    use_scm_version={'fallback_version': '0.1.0'},
    description='Four register (X, Y, Z, T) RPN calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['rpn4'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    extras_require={
        'test': [
            'pytest',
            'hypothesis',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
