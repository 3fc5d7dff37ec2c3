from setuptools import setup

setup(
    name='lavaboard',
    version='0.1.0',
    description='Box-drawn nested debug consoles and growable character canvases',
    author='LavaChicken contributors',
    package_dir={'': 'src'},
    packages=['lavaboard', 'lavaboard.renderer', 'lavaboard.cli'],
    python_requires='>=3.8',
    install_requires=[
        'click>=7.0',
        'rich>=9.0'
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'lvb = lavaboard.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
