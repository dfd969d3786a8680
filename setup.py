from setuptools import setup

setup(
    name='robgeom',
    version='0.1',
    packages=['robgeom', 'robgeom.spatial'],
    install_requires=['numpy', 'shapely'],
    extras_require={'test':['pytest']},
    license='MIT',
    description="Robust geometric predicates: orientation, segment intersection, point location",
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
)
