from setuptools import setup, find_packages

setup(
    name='BiMap',
    version='0.1',
    url='https://github.com/bimap.git',
    author='Javier Mansilla',
    author_email='javimansilla@gmail.com',
    description='One-to-one bidirectional map with O(1) lookup from either side',
    packages=find_packages(exclude=['tests']),
    install_requires=['lark==1.1.9', 'pytest==8.2.2'],
)
