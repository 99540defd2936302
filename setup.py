from setuptools import setup, find_packages


setup(
    name='glmath',
    version='1.0.0',
    description='Fixed size vectors, matrices, quaternions, and dual quaternions for 3D graphics math',
    packages=find_packages(include=['glmath', 'glmath.*']),
    python_requires='>=3.11',
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
)
