import os


# print every stage of the uri assembler as it runs
DEBUG = bool(os.environ.get('URIVIEW_DEBUG'))

# colored output of the command line tool, unless NO_COLOR is set
COLOR = not os.environ.get('NO_COLOR')
