'''Backstage Software Catalog data sources'''
