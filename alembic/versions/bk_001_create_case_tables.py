"""create BK case tables

Revision ID: bk_001
Revises: 
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = 'bk_001'
down_revision = None
branch_labels = None
depends_on = None


def _base_columns():
    return [
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
    ]


def _base_indexes(table: str) -> None:
    op.create_index(op.f(f'ix_{table}_id'), table, ['id'])
    op.create_index(op.f(f'ix_{table}_created_at'), table, ['created_at'])


def upgrade() -> None:
    # Collaborator tables: schools, classes, students, staff users
    op.create_table('tenants',
        *_base_columns(),
        sa.Column('school_code', sa.String(length=10), nullable=False),
        sa.Column('school_name', sa.String(length=200), nullable=False),
        sa.Column('address', sa.String(length=500), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    _base_indexes('tenants')
    op.create_index(op.f('ix_tenants_school_code'), 'tenants', ['school_code'], unique=True)
    op.create_index(op.f('ix_tenants_school_name'), 'tenants', ['school_name'])

    op.create_table('classes',
        *_base_columns(),
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('class_name', sa.String(length=50), nullable=False),
        sa.ForeignKeyConstraint(['tenant_id'], ['tenants.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('tenant_id', 'class_name', name='uq_class_identity')
    )
    _base_indexes('classes')
    op.create_index(op.f('ix_classes_tenant_id'), 'classes', ['tenant_id'])
    op.create_index(op.f('ix_classes_class_name'), 'classes', ['class_name'])

    op.create_table('students',
        *_base_columns(),
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('class_id', sa.Uuid(), nullable=True),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('nis', sa.String(length=20), nullable=True),
        sa.Column('nisn', sa.String(length=20), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('is_deleted', sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(['tenant_id'], ['tenants.id'], ),
        sa.ForeignKeyConstraint(['class_id'], ['classes.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    _base_indexes('students')
    for column in ('tenant_id', 'class_id', 'name', 'nis', 'nisn', 'is_deleted'):
        op.create_index(op.f(f'ix_students_{column}'), 'students', [column])

    op.create_table('users',
        *_base_columns(),
        sa.Column('tenant_id', sa.Uuid(), nullable=True),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('full_name', sa.String(length=255), nullable=True),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('is_deleted', sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(['tenant_id'], ['tenants.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    _base_indexes('users')
    op.create_index(op.f('ix_users_tenant_id'), 'users', ['tenant_id'])
    op.create_index(op.f('ix_users_username'), 'users', ['username'], unique=True)
    op.create_index(op.f('ix_users_full_name'), 'users', ['full_name'])
    op.create_index(op.f('ix_users_is_deleted'), 'users', ['is_deleted'])

    # BK tables
    op.create_table('violation_categories',
        *_base_columns(),
        sa.Column('school_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('default_point', sa.Integer(), nullable=False),
        sa.Column('default_level', sa.String(length=20), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.CheckConstraint('default_point <= 0', name='ck_category_point_not_positive'),
        sa.ForeignKeyConstraint(['school_id'], ['tenants.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    _base_indexes('violation_categories')
    op.create_index(op.f('ix_violation_categories_school_id'), 'violation_categories', ['school_id'])

    op.create_table('violations',
        *_base_columns(),
        sa.Column('student_id', sa.Uuid(), nullable=False),
        sa.Column('category_id', sa.Uuid(), nullable=True),
        sa.Column('created_by', sa.Uuid(), nullable=False),
        sa.Column('category', sa.String(length=100), nullable=False),
        sa.Column('level', sa.String(length=20), nullable=False),
        sa.Column('point', sa.Integer(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(['student_id'], ['students.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['category_id'], ['violation_categories.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['created_by'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    _base_indexes('violations')
    op.create_index(op.f('ix_violations_student_id'), 'violations', ['student_id'])
    op.create_index('idx_violation_student_created', 'violations', ['student_id', 'created_at'])

    op.create_table('achievements',
        *_base_columns(),
        sa.Column('student_id', sa.Uuid(), nullable=False),
        sa.Column('created_by', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('point', sa.Integer(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.CheckConstraint('point > 0', name='ck_achievement_point_positive'),
        sa.ForeignKeyConstraint(['student_id'], ['students.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['created_by'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    _base_indexes('achievements')
    op.create_index(op.f('ix_achievements_student_id'), 'achievements', ['student_id'])
    op.create_index('idx_achievement_student_created', 'achievements', ['student_id', 'created_at'])

    op.create_table('permits',
        *_base_columns(),
        sa.Column('student_id', sa.Uuid(), nullable=False),
        sa.Column('responsible_teacher_id', sa.Uuid(), nullable=False),
        sa.Column('created_by', sa.Uuid(), nullable=False),
        sa.Column('reason', sa.Text(), nullable=False),
        sa.Column('exit_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('return_time', sa.DateTime(timezone=True), nullable=True),
        sa.Column('document_url', sa.String(length=500), nullable=True),
        sa.ForeignKeyConstraint(['student_id'], ['students.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['responsible_teacher_id'], ['users.id'], ),
        sa.ForeignKeyConstraint(['created_by'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    _base_indexes('permits')
    op.create_index(op.f('ix_permits_student_id'), 'permits', ['student_id'])
    op.create_index(op.f('ix_permits_responsible_teacher_id'), 'permits', ['responsible_teacher_id'])
    op.create_index(op.f('ix_permits_exit_time'), 'permits', ['exit_time'])
    op.create_index('idx_permit_open', 'permits', ['student_id', 'return_time'])

    op.create_table('counseling_notes',
        *_base_columns(),
        sa.Column('student_id', sa.Uuid(), nullable=False),
        sa.Column('created_by', sa.Uuid(), nullable=False),
        sa.Column('internal_note', sa.Text(), nullable=False),
        sa.Column('parent_summary', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['student_id'], ['students.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['created_by'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    _base_indexes('counseling_notes')
    op.create_index(op.f('ix_counseling_notes_student_id'), 'counseling_notes', ['student_id'])
    op.create_index('idx_counseling_student_created', 'counseling_notes', ['student_id', 'created_at'])


def downgrade() -> None:
    for table in (
        'counseling_notes', 'permits', 'achievements', 'violations',
        'violation_categories', 'users', 'students', 'classes', 'tenants',
    ):
        op.drop_table(table)
