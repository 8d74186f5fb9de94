from .PagedList import PagedList
