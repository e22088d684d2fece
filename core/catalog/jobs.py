#!/usr/bin/env python3
"""
Job Catalog - Simplified occupation profiles with reference trait weights.

Illustrative profiles (not exhaustive O*Net data). Each carries a
Holland and Big Five reference vector (roughly 1-5 per dimension), an
industry label for preference matching and activity keywords.
"""

from core.scorer.models import HollandVector, BigFiveVector, JobProfile

JOB_PROFILES = (
    JobProfile(
        title='Software Developer',
        description='Designs, develops, and maintains software applications.',
        holland=HollandVector(R=2, I=5, A=3, S=1, E=2, C=4),
        big_five=BigFiveVector(O=4, C=5, E=2, A=3, N=2),
        industry='Technology',
        keywords=('coding', 'programming', 'logic', 'problem-solving', 'design',
                  'development', 'analysis', 'algorithms'),
    ),
    JobProfile(
        title='Graphic Designer',
        description='Creates visual concepts using computer software or by hand to communicate '
                    'ideas that inspire, inform, or captivate consumers.',
        holland=HollandVector(R=1, I=2, A=5, S=3, E=2, C=1),
        big_five=BigFiveVector(O=5, C=3, E=3, A=4, N=3),
        industry='Arts & Entertainment',
        keywords=('design', 'creativity', 'visuals', 'art', 'drawing', 'illustration',
                  'software', 'communication'),
    ),
    JobProfile(
        title='Registered Nurse',
        description='Provides and coordinates patient care, educates patients and the public about '
                    'various health conditions, and provides advice and emotional support to '
                    'patients and their family members.',
        holland=HollandVector(R=2, I=3, A=1, S=5, E=2, C=4),
        big_five=BigFiveVector(O=3, C=4, E=3, A=5, N=3),
        industry='Healthcare',
        keywords=('patient care', 'helping', 'counseling', 'medical', 'health', 'support',
                  'communication', 'problem-solving'),
    ),
    JobProfile(
        title='Accountant',
        description='Prepares and examines financial records, ensures that financial records are '
                    'accurate and that taxes are paid properly and on time.',
        holland=HollandVector(R=1, I=3, A=1, S=2, E=3, C=5),
        big_five=BigFiveVector(O=2, C=5, E=3, A=3, N=2),
        industry='Finance',
        keywords=('numbers', 'data', 'organizing', 'analysis', 'records', 'details',
                  'finance', 'tax'),
    ),
    JobProfile(
        title='Marketing Manager',
        description='Plans, directs, or coordinates marketing policies and programs, such as '
                    'determining the demand for products and services offered by a firm and '
                    'its competitors.',
        holland=HollandVector(R=1, I=2, A=3, S=4, E=5, C=2),
        big_five=BigFiveVector(O=4, C=4, E=5, A=4, N=2),
        industry='Retail',
        keywords=('leading', 'persuading', 'strategy', 'communication', 'sales', 'marketing',
                  'creativity', 'management'),
    ),
    JobProfile(
        title='Electrician',
        description='Installs, maintains, and repairs electrical wiring, equipment, and fixtures.',
        holland=HollandVector(R=5, I=3, A=1, S=2, E=2, C=4),
        big_five=BigFiveVector(O=2, C=5, E=2, A=3, N=2),
        industry='Construction',
        keywords=('hands-on', 'repair', 'installation', 'technical', 'electrical', 'building',
                  'problem-solving', 'tools'),
    ),
    JobProfile(
        title='Research Scientist',
        description='Conducts experiments and investigations to test hypotheses and develop '
                    'new knowledge.',
        holland=HollandVector(R=3, I=5, A=2, S=1, E=2, C=4),
        big_five=BigFiveVector(O=5, C=4, E=2, A=3, N=2),
        industry='Education',
        keywords=('research', 'experiments', 'analysis', 'investigation', 'theories',
                  'problem-solving', 'data', 'writing'),
    ),
    JobProfile(
        title='Teacher (High School)',
        description='Instructs students in a variety of academic subjects in public or private '
                    'secondary schools.',
        holland=HollandVector(R=1, I=3, A=3, S=5, E=2, C=2),
        big_five=BigFiveVector(O=4, C=4, E=4, A=5, N=3),
        industry='Education',
        keywords=('teaching', 'educating', 'helping', 'communication', 'planning', 'mentoring',
                  'classroom', 'public speaking'),
    ),
    JobProfile(
        title='Financial Analyst',
        description='Guides businesses and individuals in making investment decisions.',
        holland=HollandVector(R=1, I=4, A=1, S=2, E=4, C=5),
        big_five=BigFiveVector(O=3, C=5, E=4, A=3, N=2),
        industry='Finance',
        keywords=('finance', 'investment', 'analysis', 'numbers', 'data', 'advising',
                  'strategy', 'markets'),
    ),
    JobProfile(
        title='Social Worker',
        description='Helps people cope with challenges in their lives, provides support and '
                    'resources.',
        holland=HollandVector(R=1, I=2, A=3, S=5, E=2, C=1),
        big_five=BigFiveVector(O=4, C=3, E=3, A=5, N=4),
        industry='Healthcare',
        keywords=('helping', 'counseling', 'support', 'community', 'advocacy', 'communication',
                  'problem-solving', 'empathy'),
    ),
)

TOP_INDUSTRIES = (
    'Technology',
    'Healthcare',
    'Education',
    'Finance',
    'Manufacturing',
    'Retail',
    'Hospitality',
    'Construction',
    'Arts & Entertainment',
    'Government',
)


def get_job(job_id: int) -> JobProfile:
    """Look up a catalog job by its index; raises IndexError for unknown ids."""
    if job_id < 0:
        raise IndexError(job_id)
    return JOB_PROFILES[job_id]
