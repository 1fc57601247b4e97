"""
Jobly - companies, jobs, users and job applications over HTTP
"""
__version__ = "0.1.0"
